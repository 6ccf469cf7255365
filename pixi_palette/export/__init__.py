from .console import format_contrast_table, print_feedback, print_palette
from .json_export import export_json

__all__ = ["export_json", "format_contrast_table", "print_feedback", "print_palette"]
