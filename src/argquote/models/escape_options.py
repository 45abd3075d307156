"""User-facing escaping options."""

from pydantic import BaseModel, ConfigDict


class EscapeOptions(BaseModel):
    """Options accepted by `Escaper`.

    `shell` is `False` for no shell, `True` for the platform default shell,
    or the name or path of a shell executable.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    flag_protection: bool = True
    shell: bool | str = True
