"""Export functionality for practice sheets."""

from .docx_generator import export_to_docx, export_with_separate_answers, generate_answer_key

__all__ = ["export_to_docx", "export_with_separate_answers", "generate_answer_key"]
