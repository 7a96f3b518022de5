# src/auditor/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Callable, List, Set

from .core import RuleDefinition

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for structural audit rules.

    Dynamically discovers and loads RuleDefinition modules from the
    'auditor.dom.rules' package to populate rules and issue codes.
    """

    _definitions: List[RuleDefinition] = []
    _audit_rules: List[Callable] = []
    _all_codes: Set[str] = set()
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Discovers and registers all rule definitions found in the 'auditor.dom.rules' package.

        This method scans the `auditor.dom.rules` package for modules containing a
        `DEFINITION` attribute (instance of `RuleDefinition`). Rules are registered
        in ascending `order` of their definition, so reports are stable.
        """
        if cls._loaded:
            return

        try:
            # Import the rules package to iterate over its modules
            import auditor.dom.rules as rules_pkg

            definitions: List[RuleDefinition] = []
            for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
                full_name = f"auditor.dom.rules.{name}"
                try:
                    module = importlib.import_module(full_name)
                    if hasattr(module, "DEFINITION") and isinstance(module.DEFINITION, RuleDefinition):
                        definitions.append(module.DEFINITION)
                        logger.debug(f"Rules loaded: {module.DEFINITION.name}")
                except Exception as e:
                    logger.error(f"Error loading module {name}: {e}")

            for defn in sorted(definitions, key=lambda d: (d.order, d.name)):
                cls._definitions.append(defn)
                cls._audit_rules.extend(defn.audit_rules)
                cls._all_codes.update(defn.codes)

            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find rules package: {e}")

    @classmethod
    def get_all_rules(cls) -> List[Callable]:
        """Returns a list of all registered audit rule functions, in report order."""
        return list(cls._audit_rules)

    @classmethod
    def get_definitions(cls) -> List[RuleDefinition]:
        return list(cls._definitions)

    @classmethod
    def get_all_possible_codes(cls) -> List[str]:
        """Returns a sorted list of all unique issue codes registered in the system."""
        return sorted(list(cls._all_codes))
