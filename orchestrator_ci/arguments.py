"""
Script: orchestrator_ci/arguments.py
What: Builds the `uipcli` argument vector and a secret-masked copy of it for logs.
Doing: Maps named options to flag/value tokens in a fixed order and masks values that follow secret flags.
Why: The CLI takes passwords and tokens as plain arguments, and command lines end up in CI logs.
Goal: Make it impossible to log an invocation without going through the masking table.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass


MASK_CHAR = "*"
TOKEN_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class MaskRule:
    """
    How much of a secret value may be shown.

    `visible_prefix=0` is full masking. A positive value keeps that many leading
    characters (partial masking) so operators can tell credentials apart.
    """

    visible_prefix: int = 0


FULL_MASK = MaskRule()


def partial_mask(visible_prefix: int) -> MaskRule:
    return MaskRule(visible_prefix=visible_prefix)


# One rule per kind of secret, shared by every command.
# New secret flags pick a kind here instead of listing their own rule, so a
# second flag carrying the same kind of secret cannot be left unmasked.
SECRET_KINDS: dict[str, MaskRule] = {
    "password": FULL_MASK,
    "client_secret": FULL_MASK,
    "token": partial_mask(TOKEN_PREFIX_LENGTH),
}


def mask_value(value: str, rule: MaskRule) -> str:
    """
    Mask one secret value.

    If the value is not longer than the visible prefix, nothing is revealed.
    Example with prefix 4: `abcd1234567` -> `abcd*******`, `abc` -> `***`.
    """
    keep = rule.visible_prefix
    if keep <= 0 or len(value) <= keep:
        return MASK_CHAR * len(value)
    return value[:keep] + MASK_CHAR * (len(value) - keep)


def _is_present(value: str | bool | None) -> bool:
    return value is not None and value is not False and value != ""


def build(
    params: Mapping[str, str | bool | None],
    ordering: Sequence[str],
    positional: Iterable[str] = (),
) -> list[str]:
    """
    Build the argument vector passed to the subprocess.

    - `ordering` lists option names in the order the CLI expects them.
    - Names in `positional` emit only their value.
    - Other names are flag tokens and emit `flag value`, or only `flag` when the
      value is `True` (a switch).
    - Empty or missing values are skipped entirely, flag included.
    """
    positional_names = set(positional)
    vector: list[str] = []
    for name in ordering:
        value = params.get(name)
        if not _is_present(value):
            continue
        if name in positional_names:
            vector.append(str(value))
        elif value is True:
            vector.append(name)
        else:
            vector.extend([name, str(value)])
    return vector


def redact(vector: Sequence[str], table: Mapping[str, MaskRule]) -> list[str]:
    """
    Return a copy of `vector` with the value after each flag in `table` masked.

    The result always has the same length as the input, and tokens that do not
    follow a secret flag are copied unchanged. Apply once per vector: masked
    output is not meant to be redacted again.
    """
    redacted: list[str] = []
    pending_rule: MaskRule | None = None
    for token in vector:
        if pending_rule is not None:
            redacted.append(mask_value(token, pending_rule))
            pending_rule = None
            continue
        redacted.append(token)
        pending_rule = table.get(token)
    return redacted


def redact_positions(vector: Sequence[str], positions: Mapping[int, MaskRule]) -> list[str]:
    """
    Return a copy of `vector` with the tokens at `positions` masked.

    Unlike `redact`, no token is looked up by its text, so a plain value that
    happens to look like a secret flag cannot shift the mask onto the wrong token.
    """
    return [
        mask_value(token, positions[index]) if index in positions else token
        for index, token in enumerate(vector)
    ]


@dataclass(frozen=True)
class Option:
    """One named option: a positional value, a flag with a value, or a switch."""

    name: str
    value: str | bool | None
    positional: bool = False
    secret: str = ""


class OptionSpec:
    """
    Immutable, ordered list of options for one CLI invocation.

    Every method that adds options returns a new `OptionSpec`, so a spec built
    from validated parameters cannot change between logging and execution.
    """

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: tuple[Option, ...] = tuple(options)

    @property
    def options(self) -> tuple[Option, ...]:
        return self._options

    def _with(self, option: Option) -> OptionSpec:
        # Options are keyed by name when building, so names must stay unique.
        if any(existing.name == option.name for existing in self._options):
            raise ValueError(f"Option already set: {option.name}")
        return OptionSpec((*self._options, option))

    def positional(self, name: str, value: str | None) -> OptionSpec:
        return self._with(Option(name, value, positional=True))

    def flag(self, flag: str, value: str | None, *, secret: str = "") -> OptionSpec:
        if secret and secret not in SECRET_KINDS:
            raise ValueError(f"Unknown secret kind: {secret}")
        return self._with(Option(flag, value, secret=secret))

    def switch(self, flag: str, enabled: bool) -> OptionSpec:
        return self._with(Option(flag, enabled))

    def extend(self, other: OptionSpec) -> OptionSpec:
        combined = self
        for option in other.options:
            combined = combined._with(option)
        return combined

    def arguments(self) -> list[str]:
        """Argument vector for the subprocess (secrets included)."""
        params = {option.name: option.value for option in self._options}
        ordering = [option.name for option in self._options]
        positional = [option.name for option in self._options if option.positional]
        return build(params, ordering, positional)

    def masking_table(self) -> dict[str, MaskRule]:
        """Flag token -> mask rule for every option tagged with a secret kind."""
        return {
            option.name: SECRET_KINDS[option.secret]
            for option in self._options
            if option.secret
        }

    def secret_positions(self) -> dict[int, MaskRule]:
        """Index in `arguments()` -> mask rule for every secret value."""
        positions: dict[int, MaskRule] = {}
        index = 0
        for option in self._options:
            if not _is_present(option.value):
                continue
            if option.positional or option.value is True:
                index += 1
                continue
            if option.secret:
                positions[index + 1] = SECRET_KINDS[option.secret]
            index += 2
        return positions

    def redacted(self) -> list[str]:
        """Argument vector safe to print in logs."""
        return redact_positions(self.arguments(), self.secret_positions())
