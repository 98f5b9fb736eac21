from .evaluator import Evaluator, evaluate
from .pretty_printer import PrettyPrinter, format_number, pretty_print
from .tree_renderer import TreeRenderer

__all__ = [
    "Evaluator",
    "PrettyPrinter",
    "TreeRenderer",
    "evaluate",
    "format_number",
    "pretty_print",
]
