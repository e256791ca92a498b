"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(freeze_on_dispatch=False)
    """

    # Freeze the route table on the first dispatch()/match() call.
    # Registration after that point raises RuntimeError.
    freeze_on_dispatch: bool = True

    # Prefix of the NotFound detail when nothing matches
    not_found_detail: str = "Not Found"
