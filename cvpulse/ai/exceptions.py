class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""
