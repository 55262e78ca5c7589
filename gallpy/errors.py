"""Exceptions raised while scanning, resizing and rendering a gallery."""


class GallpyError(Exception):
    pass


class ScanError(GallpyError):
    """A directory could not be listed."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause}")


class ResizeError(GallpyError):
    """The resize collaborator failed. Carries the command for reproducing by hand."""

    def __init__(self, command, returncode=None, cause=None, stderr=""):
        self.command = command
        self.returncode = returncode
        self.cause = cause
        self.stderr = (stderr or "").strip()
        if returncode is not None:
            reason = f"exit status {returncode}"
        else:
            reason = str(cause)
        if self.stderr:
            reason = f"{reason}: {self.stderr}"
        super().__init__(f"Resize command ({command}) failed: {reason}")


class RenderError(GallpyError):
    def __init__(self, template, cause):
        self.template = template
        self.cause = cause
        super().__init__(f"Rendering {template} failed: {cause}")
