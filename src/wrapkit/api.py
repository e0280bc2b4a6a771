"""Public API for wrapkit.

High-level functions wrapping objects into dicts. Callers should use these
instead of driving wrapkit.kernel.wrapper.Wrapper directly.
"""

import logging
from typing import Any, Iterable, List, Optional

from wrapkit.contracts import WrapIssue, WrapResult
from wrapkit.kernel.dates import DateFormatterLike
from wrapkit.kernel.errors import InvalidTopLevelResultError, WrapError
from wrapkit.kernel.leaves import ABSENT, index_path
from wrapkit.kernel.wrapper import WrapOptions, WrapSession, Wrapper, active_hook

logger = logging.getLogger(__name__)


def _make_wrapper(
    context: Any,
    date_formatter: Optional[DateFormatterLike],
    options: Optional[WrapOptions],
) -> Wrapper:
    return Wrapper(WrapSession(
        context=context,
        date_formatter=date_formatter,
        options=options or WrapOptions(),
    ))


def _require_dict(result: Any, path: str = "") -> dict:
    if not isinstance(result, dict):
        result_type = "ABSENT" if result is ABSENT else type(result).__name__
        raise InvalidTopLevelResultError(result_type, path)
    return result


def wrap(
    obj: Any,
    context: Any = None,
    date_formatter: Optional[DateFormatterLike] = None,
    *,
    options: Optional[WrapOptions] = None,
) -> dict:
    """Wrap an object into a dict.

    Args:
        obj: Root object (dataclass, pydantic model, plain object, mapping, ...)
        context: Opaque value handed to every WrapCustomizable hook
        date_formatter: Formatter for temporal values (``format()`` or callable)
        options: Engine switches

    Returns:
        Insertion-ordered dict of plain dicts, lists and scalars

    Raises:
        InvalidTopLevelResultError: If obj does not wrap to a dict
        WrapError: On any failure while wrapping
    """
    logger.debug("Wrapping %s", type(obj).__name__)
    result = _make_wrapper(context, date_formatter, options).wrap(obj)
    wrapped = _require_dict(result)
    logger.debug("Wrapped %s into %d keys", type(obj).__name__, len(wrapped))
    return wrapped


def wrap_many(
    objects: Iterable[Any],
    context: Any = None,
    date_formatter: Optional[DateFormatterLike] = None,
    *,
    options: Optional[WrapOptions] = None,
) -> List[dict]:
    """Wrap each object into a dict, keeping order.

    Raises:
        InvalidTopLevelResultError: If any object does not wrap to a dict
        WrapError: On any failure while wrapping
    """
    wrapper = _make_wrapper(context, date_formatter, options)
    results = [
        _require_dict(wrapper.wrap(obj, index_path("", i)), index_path("", i))
        for i, obj in enumerate(objects)
    ]
    logger.debug("Wrapped %d objects", len(results))
    return results


def wrap_value(
    value: Any,
    context: Any = None,
    date_formatter: Optional[DateFormatterLike] = None,
    *,
    options: Optional[WrapOptions] = None,
    name: Optional[str] = None,
) -> Any:
    """Wrap any value without the top-level dict requirement.

    Meant for customization hooks encoding nested data. Called from a running
    hook with that hook's context and date formatter (or none) and no
    options, it continues the running session: options, cycle tracking and
    error paths carry on below the hook. ``name`` is the path segment for
    value; by default it is the field of the hook's owner holding value.
    May return ABSENT.
    """
    frame = active_hook()
    if (
        frame is not None
        and options is None
        and _continues_session(frame.wrapper.session, context, date_formatter)
    ):
        return frame.wrapper.wrap_nested(frame.owner, value, frame.path, name)
    return _make_wrapper(context, date_formatter, options).wrap(value, name or "")


def _continues_session(session: WrapSession, context: Any, date_formatter: Any) -> bool:
    return (
        (context is None or context is session.context)
        and (date_formatter is None or date_formatter is session.date_formatter)
    )


def try_wrap(
    obj: Any,
    context: Any = None,
    date_formatter: Optional[DateFormatterLike] = None,
    *,
    options: Optional[WrapOptions] = None,
) -> WrapResult:
    """Like wrap(), but report failures as a WrapResult instead of raising."""
    try:
        value = wrap(obj, context, date_formatter, options=options)
    except WrapError as e:
        logger.debug("Wrapping %s failed: %s", type(obj).__name__, e)
        return WrapResult(ok=False, error=_issue_from_error(e))
    return WrapResult(ok=True, value=value)


def _issue_from_error(error: WrapError) -> WrapIssue:
    return WrapIssue(
        code=error.code.value,
        message=str(error),
        path=error.path,
        key=getattr(error, "key", None),
        value_type=getattr(error, "value_type", None),
    )
