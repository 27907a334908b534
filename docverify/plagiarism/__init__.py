from docverify.plagiarism.client import PlagiarismCheckClient
from docverify.plagiarism.factory import PlagiarismVerifierFactory
from docverify.plagiarism.models import JobState, PlagiarismJob, PlagiarismReport
from docverify.plagiarism.verifier import PlagiarismVerifier

__all__ = [
    "JobState",
    "PlagiarismCheckClient",
    "PlagiarismJob",
    "PlagiarismReport",
    "PlagiarismVerifier",
    "PlagiarismVerifierFactory",
]
