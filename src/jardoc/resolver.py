"""Flattening of single-inheritance chains into one ordered API."""

import logging
from enum import Enum

from jardoc.models import ApiDetails
from jardoc.registry import ClassRegistry

logger = logging.getLogger(__name__)


class CyclicInheritanceError(ValueError):
    """Raised when a class (indirectly) extends itself."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Cyclic inheritance: {' -> '.join(chain)}")


class MergePolicy(str, Enum):
    """How ancestor members are combined with a subclass's own members.

    CONCATENATE keeps every level's members (a redeclared member appears once
    per level). OVERRIDE drops ancestor members whose name is already
    declared by a nearer class.
    """
    CONCATENATE = "concatenate"
    OVERRIDE = "override"

    @classmethod
    def from_name(cls, name: str) -> "MergePolicy":
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(policy.value for policy in cls)
            raise ValueError(f"Unknown member merge policy '{name}'. Supported: {valid}") from None


def _merge(own: tuple, inherited: tuple, policy: MergePolicy, key) -> tuple:
    if policy is MergePolicy.CONCATENATE:
        return own + inherited
    seen = {key(member) for member in own}
    return own + tuple(member for member in inherited if key(member) not in seen)


class InheritanceResolver:
    """Resolve the flattened public API of classes in a registry.

    One resolver serves one analysis run: results are memoized per instance
    and the registry is only read.
    """

    def __init__(self, registry: ClassRegistry, policy: MergePolicy = MergePolicy.CONCATENATE):
        self.registry = registry
        self.policy = policy
        self._resolved: dict[str, ApiDetails] = {}
        self._in_progress: list[str] = []

    def resolve(self, class_name: str) -> ApiDetails:
        """Return the class's own members followed by its ancestors' members.

        Args:
            class_name: Bare class name to resolve

        Returns:
            ApiDetails; empty if the class is not in the registry

        Raises:
            CyclicInheritanceError: If the extends chain loops back on itself
        """
        if class_name in self._resolved:
            return self._resolved[class_name]

        if class_name in self._in_progress:
            start = self._in_progress.index(class_name)
            raise CyclicInheritanceError(self._in_progress[start:] + [class_name])

        class_info = self.registry.get(class_name)
        if class_info is None:
            logger.debug(f"Class {class_name} not found in registry, resolving to empty API")
            return ApiDetails()

        if not class_info.extends_name:
            api = class_info.own_api
        else:
            self._in_progress.append(class_name)
            try:
                inherited = self.resolve(class_info.extends_name)
            finally:
                self._in_progress.pop()
            api = ApiDetails(
                properties=_merge(
                    class_info.own_properties, inherited.properties, self.policy,
                    key=lambda prop: prop.name,
                ),
                methods=_merge(
                    class_info.own_methods, inherited.methods, self.policy,
                    key=lambda method: method.display_name,
                ),
            )

        self._resolved[class_name] = api
        return api
