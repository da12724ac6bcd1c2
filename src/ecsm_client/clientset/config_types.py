"""Wire models for config items (``/configmap``).

A config item stores one value whose JSON type is announced by ``type``.
The value stays untyped on the model so that a mismatch is reported by
:func:`~.validation.check_typed_value` instead of at construction time.
"""

from typing import Any

from .base import ListOptions, WireModel
from .validation import ConfigItemType, TypedValue, decode_typed_value


class CreateConfigRequest(WireModel):
    key: str
    type: ConfigItemType | str
    value: Any


class ConfigItem(WireModel):
    id: str = ""
    key: str = ""
    type: ConfigItemType | str = ""
    value: Any = None

    def typed_value(self) -> TypedValue:
        """Return the value as the variant matching ``type``.

        Raises:
            ValidationError: If the stored value does not match ``type``.
        """
        return decode_typed_value(self.type, self.value)


class ListConfigsOptions(ListOptions):
    key: str = ""
