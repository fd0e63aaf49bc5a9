"""SynthesisConfig: behaviour switches for the description synthesizer.

SynthesisConfig is a frozen (immutable) dataclass.  It carries only behaviour
that differs between screen reader releases; infrastructure such as the number
formatter is passed to ``DescriptionSynthesizer`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SynthesisConfig"]


@dataclass(frozen=True, slots=True)
class SynthesisConfig:
    """Immutable configuration for description synthesis.

    Attributes:
        emit_unrecognized_switch_value: When True, a switch button whose value
            is not one of the tri-state codes ``"1"``/``"0"``/``"2"`` announces
            the raw value after its trait specifiers (current screen reader
            behaviour).  When False, such values are silently dropped, as older
            releases did.  Default True.
    """

    emit_unrecognized_switch_value: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.emit_unrecognized_switch_value, bool):
            msg = (
                "emit_unrecognized_switch_value must be a bool, "
                f"got {type(self.emit_unrecognized_switch_value).__name__}"
            )
            raise TypeError(msg)
