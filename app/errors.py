"""Application errors."""


class RenderError(Exception):
    """Chart renderer exited with a non-zero status."""

    def __init__(self, returncode: int, urls: list[str]):
        self.returncode = returncode
        self.urls = urls
        self.message = f"Chart renderer failed with exit code {returncode} ({len(urls)} urls)"
        super().__init__(self.message)
