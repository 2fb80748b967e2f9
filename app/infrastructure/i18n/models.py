"""Message catalog models for the i18n system.

A catalog is the key -> message mapping for one locale code, organized as
nested namespaces (e.g. ``{"HomePage": {"title": "..."}}``).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple


def _walk(messages: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in messages.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            yield from _walk(value, path)
        else:
            yield path, value


@dataclass
class MessageCatalog:
    """Container for the translated messages of a single locale.

    Attributes:
        locale: Locale code the catalog belongs to (e.g. "en", "th").
        messages: Nested dict structure {namespace: {key: message_string}}.
        loaded_at: Timestamp (ISO 8601) when the messages were loaded.
    """

    locale: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a message by its dot-separated path.

        Args:
            key: Dotted key (e.g. "HomePage.title").

        Returns:
            The message string, or None if the path does not end on a message.
        """
        node: Any = self.messages
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        if isinstance(node, dict):
            return None
        return node

    def has_message(self, key: str) -> bool:
        """Check if a message exists for the dotted key."""
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a top-level namespace."""
        return self.messages.get(namespace, {})

    def flatten(self) -> Dict[str, Any]:
        """Return the catalog as a flat {dotted.key: message} mapping."""
        return dict(_walk(self.messages))

    def keys(self) -> set:
        """Return the set of dotted message keys."""
        return set(self.flatten())

    def merge(self, other: "MessageCatalog") -> None:
        """Merge another catalog into this one.

        Nested namespaces are merged recursively; later entries override
        earlier ones.

        Args:
            other: MessageCatalog to merge.
        """
        _deep_update(self.messages, other.messages)


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        elif isinstance(value, dict):
            target[key] = {}
            _deep_update(target[key], value)
        else:
            target[key] = value
