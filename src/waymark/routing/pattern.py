"""Route pattern parsing and matching.

A pattern is split on ``/`` exactly like a request path, so the leading
slash yields an empty first segment and a trailing slash yields an empty
last one. A segment of the form ``{name}`` binds ``name``; anything else
is a literal.

Examples::

    split_path("/people/42")    -> ["", "people", "42"]
    parse_pattern("/people/{id}") -> (Segment(""), Segment("people"),
                                      Segment("{id}", param_name="id"))
"""

from dataclasses import dataclass

from waymark.errors import ConfigurationError

PARAM_OPEN = "{"
PARAM_CLOSE = "}"
SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route pattern.

    Literal:  ``people``  (param_name=None)
    Param:    ``{id}``    (param_name="id")
    """

    value: str
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.param_name is not None


def split_path(path: str) -> list[str]:
    """Split a pattern or request path into segments.

    No normalization: empty segments from leading, trailing, or doubled
    slashes are kept and must match exactly.
    """
    return path.split(SEPARATOR)


def _param_name(part: str) -> str | None:
    if len(part) >= 2 and part.startswith(PARAM_OPEN) and part.endswith(PARAM_CLOSE):
        return part[1:-1]
    return None


def parse_pattern(pattern: str, *, strict: bool = False) -> tuple[Segment, ...]:
    """Parse a route pattern into segments.

    In lenient mode (the default) nothing is rejected: a segment that is
    not a whole ``{name}`` is a literal, even if it contains braces.

    In strict mode, raises ``ConfigurationError`` when a segment contains
    a brace but is not ``{identifier}`` (``prefix-{id}``, ``{}``,
    ``{a{b}}``), or when one parameter name appears twice.
    """
    segments: list[Segment] = []
    seen: set[str] = set()
    for part in split_path(pattern):
        name = _param_name(part)
        if strict:
            _check_segment(pattern, part, name)
            if name is not None:
                if name in seen:
                    msg = f"Route pattern {pattern!r} binds parameter {name!r} more than once."
                    raise ConfigurationError(msg)
                seen.add(name)
        segments.append(Segment(value=part, param_name=name))
    return tuple(segments)


def _check_segment(pattern: str, part: str, name: str | None) -> None:
    if name is not None:
        if not name.isidentifier():
            msg = (
                f"Route pattern {pattern!r} has parameter segment {part!r}; "
                "parameter names must be identifiers like {id}."
            )
            raise ConfigurationError(msg)
        return
    if PARAM_OPEN in part or PARAM_CLOSE in part:
        msg = (
            f"Route pattern {pattern!r} has segment {part!r}. "
            "A parameter must fill the whole segment, e.g. /items/{id}."
        )
        raise ConfigurationError(msg)


def match_segments(segments: tuple[Segment, ...], parts: list[str]) -> dict[str, str] | None:
    """Match split path *parts* against pattern *segments*.

    Returns the bound parameters, or ``None`` when the segment counts
    differ or a literal segment is not equal to its path segment.
    Parameter segments accept any value, including the empty string.
    """
    if len(segments) != len(parts):
        return None
    params: dict[str, str] = {}
    for segment, part in zip(segments, parts, strict=True):
        if segment.param_name is not None:
            params[segment.param_name] = part
        elif segment.value != part:
            return None
    return params


def match_pattern(pattern: str, path: str) -> dict[str, str] | None:
    """Match a raw *pattern* string against a request *path*.

    Convenience wrapper over ``parse_pattern`` + ``match_segments``::

        match_pattern("/people/{id}", "/people/42")  -> {"id": "42"}
        match_pattern("/people/{id}", "/people")     -> None
    """
    return match_segments(parse_pattern(pattern), split_path(path))
