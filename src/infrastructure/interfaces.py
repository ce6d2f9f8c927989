"""Protocol interfaces for external collaborators."""

from typing import Any, Optional, Protocol

from domain.models import PdfOptions


class CacheClientProtocol(Protocol):
    """Protocol for a hash-valued key-value store."""

    async def hgetall(self, key: str) -> dict[str, str]:
        """Get every field of the hash at key; empty mapping when absent."""
        ...

    async def replace_hash(self, key: str, mapping: dict[str, str]) -> None:
        """Overwrite the hash at key with exactly the given fields."""
        ...


class BrowserSessionProtocol(Protocol):
    """Protocol for one scripted browser page."""

    @property
    def url(self) -> str:
        """Current page URL."""
        ...

    async def navigate(self, url: str, wait_until: str, timeout_ms: int) -> None:
        """Navigate and wait for the given load state."""
        ...

    async def wait_for_url_change(self, previous_url: str, wait_until: str, timeout_ms: int) -> bool:
        """Wait until the page leaves previous_url and reaches wait_until; False on timeout."""
        ...

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> bool:
        """Wait for an element to appear; False on timeout."""
        ...

    async def exists(self, selector: str) -> bool:
        """Check whether an element currently matches."""
        ...

    async def click(self, selector: str, timeout_ms: int) -> None:
        """Click the first matching element."""
        ...

    async def evaluate(self, script: str, arg: Optional[Any] = None) -> Any:
        """Evaluate a script in page context."""
        ...

    async def add_style(self, css: str) -> None:
        """Inject a stylesheet into the page."""
        ...

    async def content(self) -> str:
        """Serialized HTML of the current DOM."""
        ...

    async def title(self) -> str:
        """Document title."""
        ...

    async def render_pdf(self, options: PdfOptions) -> bytes:
        """Capture the page as a PDF."""
        ...

    async def close(self) -> None:
        """Close the browser behind this session."""
        ...
