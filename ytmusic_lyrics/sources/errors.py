class ProviderError(RuntimeError):
    pass


class ProviderNotInitialized(ProviderError):
    pass


class MalformedPayload(ProviderError):
    pass
