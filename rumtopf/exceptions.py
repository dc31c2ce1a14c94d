class RumtopfError(Exception):
    """Base class for all exceptions produced by rumtopf."""


class AnnotationError(RumtopfError):
    """
    A single ``{{...}}`` annotation could not be substituted (e.g. because its
    number failed to parse or its fragment failed to render). The annotation is
    left in the output verbatim.
    """


class FragmentTemplateError(RumtopfError):
    """
    The servings or scaling fragment templates could not be loaded, so no
    annotation in a text could be substituted.
    """
