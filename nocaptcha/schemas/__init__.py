from .verification import VerificationResult

__all__ = ["VerificationResult"]
