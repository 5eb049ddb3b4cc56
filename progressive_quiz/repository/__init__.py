"""Explicitly constructed stores for question content."""

from .certification_catalog import CertificationCatalog, summarize_domain
from .question_bank import QuestionBank, QuestionBankError

__all__ = ["QuestionBank", "QuestionBankError", "CertificationCatalog", "summarize_domain"]
