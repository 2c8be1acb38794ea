class Figma2HtmlError(Exception):
    """Base class for every error that aborts a conversion."""


class ConfigError(Figma2HtmlError):
    pass


class NoFramesError(Figma2HtmlError):
    pass


class FrameNotFoundError(Figma2HtmlError):
    def __init__(self, name, available):
        self.name = name
        self.available = list(available)
        super().__init__(f"Frame '{name}' not found. Available frames: {self.available}")


class FigmaAPIError(Figma2HtmlError):
    def __init__(self, endpoint, status_code, body):
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(f"Figma {endpoint} failed {status_code}: {body}")


class CyclicTreeError(Figma2HtmlError):
    """Raised when a node shows up again below itself."""
