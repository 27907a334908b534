from docverify.config.settings import Settings
from docverify.plagiarism.client import PlagiarismCheckClient
from docverify.plagiarism.verifier import PlagiarismVerifier


class PlagiarismVerifierFactory:
    """Creates the verifier wired to the configured detection service."""

    @classmethod
    def create(cls, settings: Settings) -> PlagiarismVerifier:
        client = PlagiarismCheckClient(
            api_key=settings.plagcheck_api_key.strip(),
            base_url=settings.plagcheck_base_url,
            timeout_seconds=settings.plagcheck_timeout_seconds,
        )
        return PlagiarismVerifier(
            client,
            poll_interval_seconds=settings.plagcheck_poll_interval_seconds,
            max_polls=settings.plagcheck_max_polls,
            check_timeout_seconds=settings.plagcheck_check_timeout_seconds,
        )
