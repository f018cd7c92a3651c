from gcodemachine.gcode.actions import ActionSink, MachineAction, RecordingSink
from gcodemachine.gcode.interpreter import GCodeInterpreter
from gcodemachine.gcode.tokenizer import GCodeTokenizer, Word

__all__ = [
    "ActionSink",
    "MachineAction",
    "RecordingSink",
    "GCodeInterpreter",
    "GCodeTokenizer",
    "Word",
]
