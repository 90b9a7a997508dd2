"""Typed cleaning-rules parsing.

This module loads and validates the YAML file that carries industry
canonicalization rules. It falls back to built-in defaults when no
rules file is configured.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import RULES_FILE_VERSION, SUPPORTED_RULE_MATCHES
from core.errors import SiftRulesError
from core.types import CleaningRules, IndustryRule, RuleMatch

DEFAULT_INDUSTRY_RULES = (
    IndustryRule(pattern="Crypto", canonical="Crypto Currency", match="prefix"),
)
_ROOT_KEYS = frozenset({"version", "industry_rules"})
_RULE_KEYS = frozenset({"pattern", "canonical", "match"})


def default_cleaning_rules() -> CleaningRules:
    """Return the built-in cleaning rules."""
    return CleaningRules(industry_rules=DEFAULT_INDUSTRY_RULES)


def resolve_cleaning_rules(rules_path: str | Path | None) -> CleaningRules:
    """Load rules from a file, or return defaults when no path is given."""
    if rules_path is None:
        return default_cleaning_rules()
    return load_cleaning_rules(rules_path)


def load_cleaning_rules(rules_path: str | Path) -> CleaningRules:
    """Load and validate a YAML cleaning-rules file.

    Args:
        rules_path: File path to YAML rules.

    Returns:
        Validated cleaning rules.

    Raises:
        SiftRulesError: If file is missing, unparsable, or invalid.
    """
    payload = _load_yaml_payload(Path(rules_path))
    root_mapping = _expect_mapping(payload, "rules root")
    _validate_keys(root_mapping, _ROOT_KEYS, "rules root")
    _parse_version(root_mapping)
    raw_rules = _expect_sequence(root_mapping.get("industry_rules", []), "industry_rules")
    industry_rules = tuple(
        _parse_industry_rule(raw_rule, index) for index, raw_rule in enumerate(raw_rules, 1)
    )
    return CleaningRules(industry_rules=industry_rules)


def _load_yaml_payload(rules_path: Path) -> object:
    rules_file = rules_path.expanduser().resolve()
    if not rules_file.exists():
        raise SiftRulesError(
            f"Cleaning rules file does not exist at {rules_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(rules_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise SiftRulesError(
            f"Failed to read cleaning rules at {rules_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise SiftRulesError(
            f"Failed to parse YAML cleaning rules at {rules_file}: {error}. Fix YAML syntax."
        ) from error
    if payload is None:
        raise SiftRulesError(
            f"Cleaning rules at {rules_file} are empty. Define 'version' and 'industry_rules'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise SiftRulesError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise SiftRulesError(f"Invalid {context}: expected object mapping, got {type(value).__name__}.")


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise SiftRulesError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _validate_keys(mapping: Mapping[str, object], allowed: frozenset[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed)
    if unknown_keys:
        raise SiftRulesError(
            f"Invalid {context}: unknown keys {unknown_keys}. Allowed keys: {sorted(allowed)}."
        )


def _parse_version(root_mapping: Mapping[str, object]) -> None:
    raw_version = root_mapping.get("version")
    if isinstance(raw_version, bool) or not isinstance(raw_version, int):
        raise SiftRulesError(
            f"Cleaning rules field 'version' must be an integer. Set version: {RULES_FILE_VERSION}."
        )
    if raw_version != RULES_FILE_VERSION:
        raise SiftRulesError(
            f"Unsupported cleaning rules version {raw_version}. Use version: {RULES_FILE_VERSION}."
        )


def _parse_industry_rule(raw_rule: object, index: int) -> IndustryRule:
    context = f"industry rule #{index}"
    rule_mapping = _expect_mapping(raw_rule, context)
    _validate_keys(rule_mapping, _RULE_KEYS, context)
    pattern = _required_text(rule_mapping, "pattern", context)
    canonical = _required_text(rule_mapping, "canonical", context)
    match = rule_mapping.get("match", "prefix")
    if match not in SUPPORTED_RULE_MATCHES:
        supported = ", ".join(SUPPORTED_RULE_MATCHES)
        raise SiftRulesError(
            f"Invalid {context}: unsupported match '{match}'. Choose one of: {supported}."
        )
    return IndustryRule(pattern=pattern, canonical=canonical, match=cast(RuleMatch, match))


def _required_text(mapping: Mapping[str, object], field_name: str, context: str) -> str:
    value = mapping.get(field_name)
    if not isinstance(value, str) or not value.strip():
        raise SiftRulesError(f"Invalid {context}: field '{field_name}' must be a non-empty string.")
    return value.strip()
