"""Command line entry point: ``python -m vocalprism 165``."""

import argparse
import dataclasses
import json
import logging
import os
import sys
import typing

import vocalprism.config
import vocalprism.midi_export
import vocalprism.osc
import vocalprism.pitch
import vocalprism.prism
import vocalprism.tones
import vocalprism.tuning
import vocalprism.verification


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="vocalprism", description="Analyze a voice's fundamental frequency across six musical traditions")
	parser.add_argument("f0", type=float, help="Fundamental frequency in Hz (50-1000)")
	parser.add_argument("--tuning", choices=list(vocalprism.tuning.TUNING_STANDARDS), help="Reference pitch standard (default: A440)")
	parser.add_argument("--config", help=f"YAML config file (default: {vocalprism.config.DEFAULT_CONFIG_PATH} if present)")
	parser.add_argument("--format", choices=vocalprism.config.OUTPUT_FORMATS, help="Output format (default: summary)")
	parser.add_argument("--verify", action="store_true", help="Run the arithmetic self-checks first")
	parser.add_argument("--midi", metavar="FILE", help="Write the scale run and I-IV-V chord to a MIDI file")
	parser.add_argument("--osc", action="store_true", help="Send the scale run over OSC")
	parser.add_argument("--log-level", choices=vocalprism.config.LOG_LEVELS, help="Logging level (default: INFO)")

	return parser


def resolve_settings (args: argparse.Namespace) -> vocalprism.config.Settings:

	"""Merge the config file (if any) with command line overrides."""

	if args.config:
		config = vocalprism.config.load_config(args.config)
	elif os.path.exists(vocalprism.config.DEFAULT_CONFIG_PATH):
		config = vocalprism.config.load_config(vocalprism.config.DEFAULT_CONFIG_PATH)
	else:
		config = {}

	settings = vocalprism.config.Settings.from_dict(config)

	overrides: typing.Dict[str, typing.Any] = {}

	if args.tuning:
		overrides["tuning"] = args.tuning

	if args.format:
		overrides["output_format"] = args.format

	if args.log_level:
		overrides["log_level"] = args.log_level

	return dataclasses.replace(settings, **overrides)


def format_summary (result: vocalprism.prism.PrismResult, tuning: vocalprism.tuning.TuningStandard) -> str:

	"""Plain-text report of a prism result."""

	info = result.input
	frameworks = result.frameworks
	hz = vocalprism.pitch.format_hz
	cents = vocalprism.pitch.format_cents

	lines = [
		f"{info.nearest_pitch}  {hz(info.f0)} Hz  ({cents(info.cents)} from {hz(info.nearest_pitch_hz)} Hz, {tuning.name})",
		"",
		result.narrative.short,
		"",
		result.narrative.medium,
		"",
		"Personal scale",
	]

	for degree in result.scale:
		lines.append(
			f"  {degree.degree}  {degree.svara:<4} {degree.solfege:<4} {degree.interval_name:<15} "
			f"{degree.ratio.label:>5}  {hz(degree.hz):>7} Hz  {str(degree.nearest_pitch):<4} {cents(degree.cents)}"
		)

	circle = frameworks.pythagorean.circle_position
	theta = frameworks.neuroscience.target("theta")
	deviant = ", ".join(str(n) for n in frameworks.tibetan.deviant_harmonics)

	lines.extend([
		"",
		"Frameworks",
		f"  Pythagorean   {circle.key} at position {circle.position} of the circle of fifths, comma {frameworks.pythagorean.comma.cents}¢",
		f"  Vedic         {frameworks.vedic.saptak.name}, {frameworks.vedic.chakra.name} chakra",
		f"  Gregorian     {frameworks.gregorian.mode.mode}: {frameworks.gregorian.mode.character}",
		f"  Western       {frameworks.western.key_signature.key}, {frameworks.western.vocal_category.category}",
		f"  Tibetan       {frameworks.tibetan.bowl_equivalent.size} bowl, harmonics {deviant} deviate from 12-TET",
		f"  Neuroscience  Theta: {theta.instruction}",
		"",
		"Across tunings",
	])

	for reading in vocalprism.tuning.compare_across_tunings(info.f0):
		lines.append(f"  {reading.tuning.id:<5} {str(reading.note_name):<4} {cents(reading.cents)}")

	return "\n".join(lines)


def render_tones (result: vocalprism.prism.PrismResult, settings: vocalprism.config.Settings) -> typing.Tuple[vocalprism.tones.ToneRequest, ...]:

	"""The scale run followed by the I-IV-V chord."""

	run = vocalprism.tones.scale_run(result.scale, tempo=settings.midi_tempo)
	triads = result.frameworks.western.i_iv_v

	chord = vocalprism.tones.chord(
		[triads.I.hz, triads.IV.hz, triads.V.hz],
		duration=settings.midi_note_duration,
		start=len(result.scale) * 60.0 / settings.midi_tempo,
	)

	return run + chord


def main (argv: typing.Optional[typing.Sequence[str]] = None) -> int:

	"""
	Main entry point for the vocalprism command.

	Returns 0 on success, 1 when verification or an output sink fails and 2
	for invalid input or configuration.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=args.log_level or logging.INFO)

	try:
		settings = resolve_settings(args)
	except ValueError as e:
		logger.error(f"Invalid configuration: {e}")
		return 2

	logging.getLogger().setLevel(settings.log_level)

	tuning = vocalprism.tuning.get_tuning(settings.tuning)

	if args.verify:

		checks = vocalprism.verification.verify_math()

		for check in checks:
			print(f"{'PASS' if check.passed else 'FAIL'}  {check.description}")

		if not vocalprism.verification.all_passed(checks):
			return 1

	try:
		result = vocalprism.prism.calculate_prism(args.f0, tuning.a4)
	except vocalprism.prism.DomainError as e:
		logger.error(str(e))
		return 2

	if settings.output_format == "json":
		print(json.dumps(vocalprism.prism.to_dict(result), indent=2, ensure_ascii=False))
	else:
		print(format_summary(result, tuning))

	if args.midi:
		try:
			vocalprism.midi_export.save_midi(
				render_tones(result, settings),
				args.midi,
				tempo=settings.midi_tempo,
				bend_range=settings.midi_bend_range,
				a4=tuning.a4,
			)
		except OSError:
			return 1

	if args.osc:
		try:
			sender = vocalprism.osc.ToneSender(settings.osc_host, settings.osc_port)
			sender.send_prism(result)
			sender.send_tones(vocalprism.tones.scale_run(result.scale, tempo=settings.midi_tempo))
		except OSError:
			return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
