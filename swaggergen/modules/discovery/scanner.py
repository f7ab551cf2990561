import importlib
import inspect
import pkgutil
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Dict, Iterable, List

from ..logging import BaseLogger
from ..resource import SearchHandler, get_resource_metadata, get_sub_resource_metadata


@dataclass
class ScanResult:
    """Handler instances found in the scanned packages."""
    resource_handlers: List[Any] = field(default_factory=list)
    search_handlers: List[SearchHandler] = field(default_factory=list)


class PackageScanner:
    """Finds resource and search handlers by importing packages and their sub-modules."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger

    def scan(self, packages: Iterable[str]) -> ScanResult:
        resource_classes: Dict[str, type] = {}
        search_classes: Dict[str, type] = {}

        for module in self._import_all(packages):
            for _, member in inspect.getmembers(module, inspect.isclass):
                # classes are collected where they are defined, not where re-exported
                if member.__module__ != module.__name__:
                    continue
                key = f"{member.__module__}.{member.__qualname__}"
                if get_resource_metadata(member) is not None or get_sub_resource_metadata(member) is not None:
                    resource_classes[key] = member
                elif issubclass(member, SearchHandler) and not inspect.isabstract(member):
                    search_classes[key] = member

        result = ScanResult(
            resource_handlers=self._instantiate(resource_classes),
            search_handlers=self._instantiate(search_classes),
        )
        self.logger.log_info(
            f"Found {len(result.resource_handlers)} resource handlers and "
            f"{len(result.search_handlers)} search handlers"
        )
        return result

    def _import_all(self, packages: Iterable[str]) -> List[ModuleType]:
        modules: List[ModuleType] = []
        for package_name in packages:
            try:
                package = importlib.import_module(package_name)
            except Exception as e:
                self.logger.log_warning(f"Could not import package {package_name}: {str(e)}")
                continue
            modules.append(package)

            # plain modules have no __path__ and nothing to walk
            if not hasattr(package, "__path__"):
                continue
            for info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}.",
                                              onerror=self._on_walk_error):
                try:
                    modules.append(importlib.import_module(info.name))
                except Exception as e:
                    self.logger.log_warning(f"Could not import module {info.name}: {str(e)}")
        return modules

    def _instantiate(self, classes: Dict[str, type]) -> List[Any]:
        instances = []
        for key in sorted(classes):
            try:
                instances.append(classes[key]())
            except Exception as e:
                self.logger.log_warning(f"Could not instantiate {key}: {str(e)}")
        return instances

    def _on_walk_error(self, name: str) -> None:
        self.logger.log_warning(f"Could not scan package {name}")
