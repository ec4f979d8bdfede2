import functools
from typing import Callable, Any, TypeVar

import click

from nrcli import utils


T = TypeVar("T")
U = TypeVar("U")


def mk_click_callback(f: Callable[[T], U]) -> Callable[[Any, Any, T], U]:
    @functools.wraps(f)
    def wrapper(_, __, v):
        return f(v)
    return wrapper


def nrcli_error_handler(func):
    """Turns library errors into a click error: message on stderr and a non-zero exit status."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except utils.NrcliError as e:
            raise click.ClickException(str(e)) from e
    return wrapper


# TODO: type it correctly
def compose_click_decorators_2(a, b) -> "decorator":  # noqa: F821
    def wrapper(f):
        return a(b(f))
    return wrapper
