"""YAML configuration for the command line tool.

Example ``vocalprism.yaml``:

	```yaml
	tuning: A440
	log_level: INFO
	output:
	  format: summary
	midi:
	  tempo: 120
	  bend_range: 2
	  note_duration: 1.0
	osc:
	  host: 127.0.0.1
	  port: 9001
	```

Every key is optional. Command line options override the file.
"""

import dataclasses
import logging
import os
import typing

import yaml

import vocalprism.midi_export
import vocalprism.osc
import vocalprism.tuning


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "vocalprism.yaml"

OUTPUT_FORMATS = ("summary", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config (config_path: typing.Union[str, os.PathLike] = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and ``{}`` returned.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		try:
			data = yaml.safe_load(f)
		except yaml.YAMLError as e:
			raise ValueError(f"Config file {config_path} is not valid YAML: {e}") from e

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def _section (config: typing.Mapping[str, typing.Any], key: str) -> typing.Mapping[str, typing.Any]:

	"""Return a config section, treating a missing or empty section as ``{}``."""

	section = config.get(key)

	if section is None:
		return {}

	if not isinstance(section, dict):
		raise ValueError(f"Config section {key!r} must be a mapping, got {type(section).__name__}")

	return section


def _number (section: typing.Mapping[str, typing.Any], section_name: str, key: str, default: typing.Any, kind: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:

	value = section.get(key, default)

	# YAML reads yes/no as bool.
	if isinstance(value, bool):
		raise ValueError(f"Config value {section_name}.{key} must be a number, got {value!r}")

	try:
		return kind(value)
	except (TypeError, ValueError) as e:
		raise ValueError(f"Config value {section_name}.{key} must be a number, got {value!r}") from e


@dataclasses.dataclass(frozen=True)
class Settings:

	"""Resolved settings for one command line run."""

	tuning: str = vocalprism.tuning.DEFAULT_TUNING_ID
	log_level: str = "INFO"
	output_format: str = "summary"
	midi_tempo: float = vocalprism.midi_export.DEFAULT_TEMPO
	midi_bend_range: float = vocalprism.midi_export.DEFAULT_BEND_RANGE
	midi_note_duration: float = 1.0
	osc_host: str = vocalprism.osc.DEFAULT_HOST
	osc_port: int = vocalprism.osc.DEFAULT_PORT

	def __post_init__ (self) -> None:

		# Raises ValueError for unknown ids.
		vocalprism.tuning.get_tuning(self.tuning)

		if self.log_level not in LOG_LEVELS:
			raise ValueError(f"Unknown log level: {self.log_level!r}. Available: {', '.join(LOG_LEVELS)}")

		if self.output_format not in OUTPUT_FORMATS:
			raise ValueError(f"Unknown output format: {self.output_format!r}. Available: {', '.join(OUTPUT_FORMATS)}")

		if not self.midi_tempo > 0:
			raise ValueError("MIDI tempo must be positive")

		if not self.midi_bend_range > 0:
			raise ValueError("MIDI bend range must be positive")

		if not self.midi_note_duration > 0:
			raise ValueError("MIDI note duration must be positive")


	@classmethod
	def from_dict (cls, config: typing.Mapping[str, typing.Any]) -> "Settings":

		"""Build settings from a loaded config mapping, using defaults for missing keys."""

		defaults = cls()

		output = _section(config, 'output')
		midi = _section(config, 'midi')
		osc = _section(config, 'osc')

		return cls(
			tuning=str(config.get('tuning', defaults.tuning)),
			log_level=str(config.get('log_level', defaults.log_level)).upper(),
			output_format=str(output.get('format', defaults.output_format)),
			midi_tempo=_number(midi, 'midi', 'tempo', defaults.midi_tempo, float),
			midi_bend_range=_number(midi, 'midi', 'bend_range', defaults.midi_bend_range, float),
			midi_note_duration=_number(midi, 'midi', 'note_duration', defaults.midi_note_duration, float),
			osc_host=str(osc.get('host', defaults.osc_host)),
			osc_port=_number(osc, 'osc', 'port', defaults.osc_port, int),
		)


	@property
	def a4 (self) -> float:

		return vocalprism.tuning.get_tuning(self.tuning).a4
