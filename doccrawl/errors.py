"""Exception hierarchy for the crawl core.

Fatal errors (configuration, start URL, output directory, link discovery)
propagate to the CLI.  Page-scoped errors are converted into
:class:`~doccrawl.models.PageOutcome` values by the persister.
"""


class CrawlError(Exception):
    """Base class for every error raised by doccrawl."""


class ConfigurationError(CrawlError):
    """Missing credential or start URL."""


class MalformedURL(CrawlError):
    """The string could not be parsed as an absolute URL."""


class NoDomain(CrawlError):
    """The URL parsed but carries no host component."""


class DirectoryCreationFailed(CrawlError):
    """The per-domain output directory could not be created."""


class ExtractionError(CrawlError):
    """The extraction service request failed (transport, status or body)."""


class LinkDiscoveryFailed(CrawlError):
    """The link listing for the start URL could not be obtained."""


class PageFetchFailed(CrawlError):
    """The markdown for one discovered page could not be fetched."""


class FileWriteFailed(CrawlError):
    """The markdown artifact for one page could not be written."""
