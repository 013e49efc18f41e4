"""Input normalizer: loaded artifacts → ordered rule entries.

Recognized shapes, each with its own naming policy:
    BareRule:     value with a callable create(). Named after the source file.
    PluginBundle: value with a rules mapping of bare rules. Named "plugin/rule".
    ConfigList:   list of config objects referencing "plugin/rule" ids
                  through their plugins mapping.

Anything else is fatal (InvalidArtifactError). Config references that no
declared plugin provides are dropped without error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, assert_never

from lintspec.domain.exceptions import InvalidArtifactError
from lintspec.domain.model.artifact import (
    BareRule,
    ConfigList,
    PluginBundle,
    get_field,
    is_rule,
)
from lintspec.domain.model.rule_entry import RuleEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintspec.domain.model.artifact import Artifact, SourceArtifact

logger = logging.getLogger(__name__)

# Conventional package prefixes stripped from plugin names.
PLUGIN_PREFIXES = ("eslint-plugin-", "lintspec-plugin-")


def source_stem(source: str) -> str:
    """Base name of source without directory and extension."""
    return PurePath(source).stem


def plugin_short_name(source: str, plugin: object) -> str:
    """Resolve the namespace used for rules of plugin.

    Order: meta.name, legacy name, source file stem.
    A conventional prefix is stripped from the result.

    Args:
        source: Path the plugin was loaded from
        plugin: Plugin bundle

    Returns:
        Short plugin name, e.g. "imports" for "eslint-plugin-imports"
    """
    name = get_field(get_field(plugin, "meta"), "name") or get_field(plugin, "name")
    if not isinstance(name, str) or not name:
        name = source_stem(source)

    for prefix in PLUGIN_PREFIXES:
        if name.startswith(prefix):
            return name.removeprefix(prefix)
    return name


def classify(artifact: SourceArtifact) -> Artifact:
    """Classify a loaded value into exactly one recognized shape.

    A plugin is checked before a bare rule: a value carrying both a
    rules mapping and create() is a plugin.

    Args:
        artifact: Loaded value and its source

    Returns:
        BareRule, PluginBundle or ConfigList

    Raises:
        InvalidArtifactError: If value matches no shape
    """
    value = artifact.value
    rules = get_field(value, "rules")

    if isinstance(rules, Mapping) and all(is_rule(rule) for rule in rules.values()):
        return PluginBundle(source=artifact.source, plugin=value)

    if is_rule(value):
        return BareRule(source=artifact.source, rule=value)

    if isinstance(value, list | tuple) and all(isinstance(item, Mapping) for item in value):
        return ConfigList(source=artifact.source, configs=tuple(value))

    raise InvalidArtifactError(artifact.source)


def normalize(artifacts: Iterable[SourceArtifact]) -> list[RuleEntry]:
    """Turn loaded artifacts into an ordered list of rule entries.

    Entries keep artifact order. A later entry with an already seen name
    replaces the earlier one in place.

    Args:
        artifacts: Loader output in order

    Returns:
        Rule entries, unique by name

    Raises:
        InvalidArtifactError: On the first artifact matching no shape
    """
    entries: dict[str, RuleEntry] = {}

    for artifact in artifacts:
        classified = classify(artifact)
        logger.debug("Classified %s as %s", artifact.source, type(classified).__name__)

        for entry in _expand(classified):
            if entry.name in entries:
                logger.debug("Rule %r from %s replaces an earlier entry", entry.name, artifact.source)
            entries[entry.name] = entry

    return list(entries.values())


def _expand(artifact: Artifact) -> list[RuleEntry]:
    match artifact:
        case BareRule(source=source, rule=rule):
            return [RuleEntry(name=source_stem(source), module=rule)]
        case PluginBundle(source=source, plugin=plugin):
            return _plugin_entries(source, plugin)
        case ConfigList(configs=configs):
            return [entry for config in configs for entry in _config_entries(config)]
        case _:
            assert_never(artifact)


def _plugin_entries(source: str, plugin: object) -> list[RuleEntry]:
    """Namespace every rule of plugin and register the plugin in config."""
    short_name = plugin_short_name(source, plugin)

    config: dict[str, Any] = {"plugins": {short_name: plugin}}
    languages = get_field(plugin, "languages")
    if isinstance(languages, Mapping) and languages:
        config["language"] = f"{short_name}/{next(iter(languages))}"

    rules: Mapping[str, object] = get_field(plugin, "rules")
    return [
        RuleEntry(name=f"{short_name}/{rule_name}", module=rule, config=config)
        for rule_name, rule in rules.items()
    ]


def _config_entries(config: Mapping[str, Any]) -> list[RuleEntry]:
    """Resolve rule ids of one config object through its plugins."""
    settings = {key: value for key, value in config.items() if key != "rules"}
    plugins = config.get("plugins") or {}

    entries: list[RuleEntry] = []
    for rule_id in config.get("rules") or {}:
        plugin_name, _, rule_name = rule_id.partition("/")
        plugin_rules = get_field(get_field(plugins, plugin_name), "rules")
        rule = plugin_rules.get(rule_name) if isinstance(plugin_rules, Mapping) else None

        if rule is None:
            logger.debug("Dropping %r: not provided by plugin %r", rule_id, plugin_name)
            continue

        entries.append(RuleEntry(name=rule_id, module=rule, config=settings))

    return entries
