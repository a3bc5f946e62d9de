"""
Helpers for converting methods into scripts, and filling in arguments with a connected transport.
"""

from functools import wraps
from inspect import cleandoc, signature
import logging
import sys
from typing import Any, Callable, cast, Dict, List, Optional, Union

from docopt import docopt

from ..plumbing import api
from ..plumbing.api import Transport


DocOptArgs = Dict[str, Union[bool, str, List[str], None]]

NoneType = type(None)


ENTRYPOINTS: List[str] = []


def entrypoint(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to make an entrypoint out of a generic function.

    This uses `docopt` to parse arguments according to the method docstring, and will be formatted
    with `{script}` set to the script name.  At minimum, it should contain `Usage: {script}`.

    Functions may optionally accept arguments, but they must be annotated with a recognised type in
    order to be filled in.  The following types are fixed and always available:

    - `DocOptArgs` (a `dict` of input parameters parsed from the usage line)
    - `Transport` (connected using the environment or config file, and closed afterwards)

    The types `str` and `List[str]` (or `Optional` of either) will be filled in from an input
    parameter matching the variable name (the name must be declared in the usage line, either in
    upper case or surrounded by arrow brackets, e.g. `GROUP` or `<group>`).

    An example function:

        @entrypoint
        def add(transport: Transport, group: str, user: List[str]):
            \"""
            Add users to a group.

            Usage: {script} GROUP USER...
            \"""
    """
    label = "domolib-{}-{}".format(fn.__module__.rsplit(".", 1)[-1],
                                   fn.__qualname__).replace("_", "-")

    @wraps(fn)
    def wrap(opts: Optional[DocOptArgs] = None):
        extra: Dict[str, Any] = {}
        script = "{} [--debug]".format(label)
        if opts is None:
            doc = cleandoc(fn.__doc__.format(script=script))
            opts = docopt(doc)
        if opts.pop("--debug", False):
            logging.basicConfig(level=logging.DEBUG)
        transport: Optional[Transport] = None
        # Detect resolvable-typed arguments and fill in their values.
        sig = signature(fn)
        for param in sig.parameters.values():
            name = param.name
            cls = param.annotation
            if cls is DocOptArgs:
                extra[name] = opts
                continue
            elif cls is Transport:
                if not transport:
                    try:
                        transport = api.connect()
                    except RuntimeError as ex:
                        error(str(ex), exit=1)
                extra[name] = transport
                continue
            try:
                try:
                    value = opts[name.upper()]
                except KeyError:
                    value = opts["<{}>".format(name)]
            except KeyError:
                raise RuntimeError("Missing argument {!r}".format(name))
            optional = False
            # Unpick Optional[X] by reading the type object arguments and removing type(None).
            if getattr(cls, "__origin__", None) is Union:
                cls_args = cls.__args__
                if NoneType in cls_args:
                    optional = True
                    # NB. Union[X] for a single type X automatically resolves to X.
                    cls = Union[tuple(arg for arg in cls_args if arg is not NoneType)]
            if value is None and optional:
                extra[name] = None
            elif cls is str:
                extra[name] = cast(str, value)
            elif cls == List[str]:
                extra[name] = list(cast(List[str], value))
            else:
                raise RuntimeError("Bad parameter {!r} type {!r}".format(name, cls))
        try:
            return fn(**extra)
        finally:
            if transport:
                transport.close()
    wrap.__doc__ = wrap.__doc__.format(script=label)
    # Create a console script line for setup.
    target = "{}:{}".format(fn.__module__, fn.__qualname__)
    ENTRYPOINTS.append("{}={}".format(label, target))
    return wrap


def confirm(msg: str = "Are you sure?"):
    """
    Prompt for confirmation before destructive actions.
    """
    try:
        yn = input("\033[96m{} [yN]\033[0m ".format(msg))
    except (KeyboardInterrupt, EOFError):
        print()
        yn = "n"
    if yn.lower() not in ("y", "yes"):
        error("Aborted!", exit=1)


def error(msg: Optional[str] = None, *, exit: Optional[int] = None, colour: Optional[str] = None):
    """
    Print an error message and/or exit.
    """
    if msg:
        colour = colour or ("1" if exit else "3")
        print("\033[9{}m{}\033[0m".format(colour, msg), file=sys.stderr)
    if exit is not None:
        sys.exit(exit)
