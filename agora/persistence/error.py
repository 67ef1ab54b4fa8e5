"""Store failure translation for Postgres repositories."""

import functools
from typing import Any, Awaitable, Callable, TypeVar

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agora.domain.error import StoreError

T = TypeVar("T")


def store_operation(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Wrap a repository coroutine so driver failures surface as StoreError.

    IntegrityError passes through untouched: constraint violations carry
    meaning for the domain (a duplicate vote) and are handled there.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logfire.error(
                "Store operation failed",
                operation=func.__qualname__,
                error=str(e),
            )
            raise StoreError(f"{func.__qualname__} failed") from e

    return wrapper
