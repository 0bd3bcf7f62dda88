from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

StatusCode = int
StatusLabel = str

DEFAULT_STATUSES: Dict[StatusCode, StatusLabel] = {
    1: "active",
    0: "inactive",
}


class StatusTranslator:
    """
    Bidirectional lookup between numeric product status codes and labels.

    The table is fixed at construction time and only read afterwards, so a
    single instance can be shared by every request.
    """

    def __init__(self, entries: Mapping[StatusCode, StatusLabel]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def default(cls) -> "StatusTranslator":
        return cls(DEFAULT_STATUSES)

    @property
    def entries(self) -> Mapping[StatusCode, StatusLabel]:
        return self._entries

    def _get(self, value: Any) -> Optional[StatusLabel]:
        # bool is an int subclass; True must not resolve to code 1
        if isinstance(value, bool):
            return None
        try:
            return self._entries.get(value)
        except TypeError:
            # unhashable input
            return None

    def translate(
        self, value: Any, return_label: bool = False
    ) -> Optional[Union[StatusCode, StatusLabel]]:
        """
        Code -> label, or label -> code.

        1. `value` is a known code: return its label.
        2. `value` is a known label: return the label when `return_label`
           is set (read paths), otherwise its code (write paths).
        3. Otherwise look `value` up as a code one last time; None if unknown.
        """
        label = self._get(value)
        if label is not None:
            return label

        for code, known_label in self._entries.items():
            if known_label == value:
                return known_label if return_label else code

        return self._get(value)

    def to_label(self, value: Any) -> Optional[StatusLabel]:
        return self.translate(value, return_label=True)

    def to_code(self, value: Any) -> Optional[StatusCode]:
        if self._get(value) is not None:
            return value
        code = self.translate(value)
        return code if isinstance(code, int) else None
