"""Message lookup and interpolation for a request's locale context."""

import re
from typing import Any, Dict, Optional

from infrastructure.logging import get_module_logger
from modules.i18n.core.negotiator import RequestLocaleContext

logger = get_module_logger()

_DOUBLE_BRACE = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_BRACE = re.compile(r"\{(\w+)\}")


class Translator:
    """Translates keys against one RequestLocaleContext.

    Optionally scoped to a namespace, so ``Translator(ctx, "HomePage")("title")``
    reads ``HomePage.title``.

    Attributes:
        context: Request context providing locale and messages.
        namespace: Optional key prefix.
    """

    def __init__(self, context: RequestLocaleContext, namespace: Optional[str] = None):
        self.context = context
        self.namespace = namespace

    def __call__(self, key: str, **variables: Any) -> str:
        return self.translate(key, variables)

    def translate(self, key: str, variables: Optional[Dict[str, Any]] = None) -> str:
        """Retrieve and interpolate a message.

        Supports ``{{name}}`` and ``{name}`` placeholders.

        Args:
            key: Message key, relative to the namespace when one is set.
            variables: Values for placeholders.

        Returns:
            The interpolated message. A missing key yields the full dotted
            key so rendering never breaks.

        Raises:
            ValueError: If a placeholder has no value in ``variables``.
        """
        full_key = f"{self.namespace}.{key}" if self.namespace else key
        message = self._lookup(full_key)

        if message is None:
            logger.warning(
                "translation_not_found",
                key=full_key,
                locale=self.context.locale.value,
            )
            return full_key

        return self._interpolate(str(message), variables or {})

    def has_message(self, key: str) -> bool:
        full_key = f"{self.namespace}.{key}" if self.namespace else key
        return self._lookup(full_key) is not None

    def _lookup(self, full_key: str) -> Optional[Any]:
        node: Any = self.context.messages
        for part in full_key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return None if isinstance(node, dict) else node

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        double_matches = _DOUBLE_BRACE.findall(message)
        single_matches = _SINGLE_BRACE.findall(message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double braces first so "{{x}}" is not left as "{value}"
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))
        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
