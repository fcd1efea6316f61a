"""Error types raised by the documentation retrieval layer."""


class DocsError(Exception):
	"""Base class for documentation retrieval errors."""
	pass


class DocFetchError(DocsError):
	"""Raised when a document could not be fetched from upstream."""

	def __init__(self, path: str, cause: str):
		self.path = path
		self.cause = cause
		super().__init__(f"Failed to fetch {path}: {cause}")


class TransportError(DocFetchError):
	"""Raised on network-level failures (DNS, refused connection, timeout)."""
	pass


class UpstreamError(DocFetchError):
	"""Raised when upstream answers with a non-success status."""

	def __init__(self, path: str, status: int):
		self.status = status
		super().__init__(path, f"HTTP {status}")


class UnknownPathError(DocsError):
	"""Raised when a strict catalog lookup misses."""

	def __init__(self, path: str):
		self.path = path
		super().__init__(f"Unknown documentation path: {path}")
