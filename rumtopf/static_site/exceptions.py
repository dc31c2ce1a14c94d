from rumtopf.exceptions import RumtopfError


class StaticSiteError(RumtopfError):
    """Base class for exceptions thrown during website generation."""


class DestinationError(StaticSiteError):
    """Thrown when the destination directory cannot be removed or created."""


class SourceDirectoryError(StaticSiteError):
    """Thrown when the source directory cannot be listed."""


class TemplateDirectoryError(StaticSiteError):
    """Thrown when the template override directory is not a directory."""


class NotAFileError(StaticSiteError):
    """Thrown when a source directory entry is not a regular file."""


class MissingStemError(StaticSiteError):
    """Thrown when a recipe file name has no stem (e.g. '.md')."""


class RecipeReadError(StaticSiteError):
    """Thrown when a recipe file cannot be read."""


class SourceCopyError(StaticSiteError):
    """Thrown when a non-recipe source file cannot be copied."""


class PageRenderError(StaticSiteError):
    """Thrown when a page template fails to render."""


class OutputExistsError(StaticSiteError):
    """Thrown when a page would overwrite an existing file."""


class PageWriteError(StaticSiteError):
    """Thrown when a page or asset cannot be written."""
