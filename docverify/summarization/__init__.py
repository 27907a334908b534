from docverify.summarization.factory import SummarizerFactory
from docverify.summarization.models import SummaryRequest, SummaryResult
from docverify.summarization.summarizer import Summarizer

__all__ = ["Summarizer", "SummarizerFactory", "SummaryRequest", "SummaryResult"]
