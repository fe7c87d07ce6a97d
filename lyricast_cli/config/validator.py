"""Lightweight configuration validation utilities."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Union, get_args, get_origin, get_type_hints

from .schema import CoreConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


_POSITIVE_NUMBERS = (
    "translation.timeout",
    "translation.max_text_length",
    "translation.max_chunk_size",
    "extraction.timeout",
    "retry.max_retries",
)


class ConfigValidator:
    """Validate a configuration tree against the TypedDict schema."""

    _ROOT_SCHEMA = CoreConfig

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message="Expected a mapping for the configuration root",
                )
            ]
        errors = cls._validate_typed_dict(config, cls._ROOT_SCHEMA, path="")
        if not errors:
            errors.extend(cls._validate_values(config))
        return errors

    @classmethod
    def validate_or_raise(cls, config: Mapping[str, Any]) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_typed_dict(
        cls,
        value: Mapping[str, Any],
        schema: type,
        path: str,
    ) -> List[ValidationError]:
        errors: List[ValidationError] = []
        annotations: Dict[str, Any] = get_type_hints(schema)
        required_keys = getattr(schema, "__required_keys__", frozenset())

        for key in sorted(required_keys):
            if key not in value:
                errors.append(
                    ValidationError(path=cls._join(path, key), message="Required key is missing")
                )

        for key in sorted(value.keys()):
            annotation = annotations.get(key)
            key_path = cls._join(path, key)
            if annotation is None:
                errors.append(
                    ValidationError(
                        path=key_path, message=f"Unexpected key for {schema.__name__}"
                    )
                )
                continue
            errors.extend(cls._validate_annotation(value[key], annotation, key_path))

        return errors

    @classmethod
    def _validate_annotation(cls, value: Any, annotation: Any, path: str) -> List[ValidationError]:
        if cls._is_typed_dict(annotation):
            if not isinstance(value, MappingABC):
                return [ValidationError(path=path, message=f"Expected {annotation.__name__} structure")]
            return cls._validate_typed_dict(value, annotation, path)

        if not cls._matches_type(value, annotation):
            return [
                ValidationError(
                    path=path,
                    message=f"Expected {cls._describe(annotation)}, got {type(value).__name__}",
                )
            ]

        if get_origin(annotation) is list:
            (element,) = get_args(annotation)
            errors: List[ValidationError] = []
            for index, item in enumerate(value):
                errors.extend(cls._validate_annotation(item, element, f"{path}[{index}]"))
            return errors

        return []

    @classmethod
    def _validate_values(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        from ..translation.metadata import ProviderMetadata

        errors: List[ValidationError] = []
        for dotted in _POSITIVE_NUMBERS:
            section, key = dotted.split(".")
            value = config[section].get(key)
            if value is not None and value <= 0:
                errors.append(ValidationError(path=dotted, message="Must be greater than zero"))

        delay = config["retry"].get("initial_delay")
        if delay is not None and delay < 0:
            errors.append(ValidationError(path="retry.initial_delay", message="Must not be negative"))

        providers = config["translation"].get("providers")
        if providers is not None:
            if not providers:
                errors.append(
                    ValidationError(path="translation.providers", message="At least one provider is required")
                )
            known = ProviderMetadata.list_provider_ids()
            for index, provider_id in enumerate(providers):
                if provider_id not in known:
                    errors.append(
                        ValidationError(
                            path=f"translation.providers[{index}]",
                            message=f"Unknown provider '{provider_id}' (expected one of {known})",
                        )
                    )
        return errors

    @classmethod
    def _matches_type(cls, value: Any, annotation: Any) -> bool:
        if annotation is Any:
            return True
        if annotation is type(None):
            return value is None

        origin = get_origin(annotation)
        if origin is Union:
            return any(cls._matches_type(value, option) for option in get_args(annotation))
        if origin is Literal:
            return value in get_args(annotation)
        if origin is list:
            return isinstance(value, (list, tuple))

        if annotation is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if annotation is int:
            return isinstance(value, int) and not isinstance(value, bool)
        if isinstance(annotation, type):
            return isinstance(value, annotation)
        return True

    @staticmethod
    def _join(path: str, key: str) -> str:
        return key if not path else f"{path}.{key}"

    @staticmethod
    def _is_typed_dict(annotation: Any) -> bool:
        return (
            isinstance(annotation, type)
            and issubclass(annotation, dict)
            and hasattr(annotation, "__required_keys__")
        )

    @classmethod
    def _describe(cls, annotation: Any) -> str:
        origin = get_origin(annotation)
        if origin is Union:
            return " | ".join(cls._describe(opt) for opt in get_args(annotation))
        if origin is Literal:
            return "literal (" + ", ".join(repr(arg) for arg in get_args(annotation)) + ")"
        if origin is list:
            return f"list of {cls._describe(get_args(annotation)[0])}"
        if annotation is type(None):
            return "None"
        if isinstance(annotation, type):
            return annotation.__name__
        return str(annotation)
