"""
Feature gating of operations.

``select_operations`` is pure: same settings, same tuple. The pipeline
also calls ``ensure_enabled`` per invocation so a disabled operation that
is invoked directly still refuses.
"""

from typing import Iterable, Optional, Tuple

from swig_agent.application.operations import (
    Operation,
    OperationCategory,
    default_operations,
)
from swig_agent.config.settings import Settings
from swig_agent.domain.exceptions import FeatureDisabledError
from swig_agent.infrastructure.monitoring import ReplyEmoji


def _disabled_error(category: OperationCategory) -> FeatureDisabledError:
    if category == OperationCategory.TRANSFER:
        return FeatureDisabledError(
            f"{ReplyEmoji.FAILURE} Transfer operations are currently disabled. "
            "Set SWIG_TRANSFERS_ENABLED=true to enable transfers.",
            thought="Transfer operations have been disabled in the plugin configuration.",
            setting="SWIG_TRANSFERS_ENABLED",
        )
    return FeatureDisabledError(
        f"{ReplyEmoji.FAILURE} Authority management operations are currently "
        "disabled. Set SWIG_AUTHORITY_MANAGEMENT_ENABLED=true to enable "
        "authority management.",
        thought=(
            "Authority management operations have been disabled in the plugin "
            "configuration."
        ),
        setting="SWIG_AUTHORITY_MANAGEMENT_ENABLED",
    )


def is_operation_enabled(operation: Operation, settings: Settings) -> bool:
    """Whether the operation's category is switched on."""
    if operation.category == OperationCategory.TRANSFER:
        return settings.SWIG_TRANSFERS_ENABLED
    if operation.category == OperationCategory.AUTHORITY:
        return settings.SWIG_AUTHORITY_MANAGEMENT_ENABLED
    return True


def ensure_enabled(operation: Operation, settings: Settings) -> None:
    """
    Refuse a disabled operation.

    Raises:
        FeatureDisabledError: With the reply text and thought to show
    """
    if not is_operation_enabled(operation, settings):
        raise _disabled_error(operation.category)


def select_operations(
    settings: Settings,
    catalogue: Optional[Iterable[Operation]] = None,
) -> Tuple[Operation, ...]:
    """
    Operations to expose for the given settings.

    Args:
        settings: Loaded settings
        catalogue: Candidate operations (default: the full catalogue)

    Returns:
        Enabled operations, catalogue order preserved
    """
    candidates = default_operations() if catalogue is None else tuple(catalogue)
    return tuple(op for op in candidates if is_operation_enabled(op, settings))
