"""The prism - one f0 in, a complete cross-tradition analysis out.

:func:`calculate_prism` is the single entry point of the engine. It validates
f0, names it, builds the personal scale, runs all six framework analyzers,
and writes a short narrative from their results. It is the only place in the
engine that raises (:class:`DomainError`); everything it calls assumes a
valid f0.

Example:
	```python
	import vocalprism.prism

	result = vocalprism.prism.calculate_prism(165.0)

	str(result.input.nearest_pitch)            # "E3"
	result.scale[4].hz                         # 247.5
	result.frameworks.vedic.shruti.scale[0].hz # 165.0
	result.narrative.short
	# "Tenor / Low Alto voice at 165.0 Hz (E3), Phrygian mode."
	```
"""

import dataclasses
import logging
import math
import numbers
import typing

import vocalprism.frameworks.gregorian
import vocalprism.frameworks.neuroscience
import vocalprism.frameworks.pythagorean
import vocalprism.frameworks.tibetan
import vocalprism.frameworks.vedic
import vocalprism.frameworks.western
import vocalprism.pitch
import vocalprism.ratios
import vocalprism.scale


logger = logging.getLogger(__name__)


MIN_F0 = 50.0
MAX_F0 = 1000.0


class DomainError (ValueError):

	"""Raised when f0 is not a finite number between ``MIN_F0`` and ``MAX_F0`` Hz."""


@dataclasses.dataclass(frozen=True)
class PitchInfo:

	"""
	f0 named against the reference tuning.

	Attributes:
		f0: The input frequency.
		a4: Reference pitch used for naming.
		midi: Continuous MIDI value of f0.
		nearest_pitch: Nearest equal-tempered pitch.
		nearest_pitch_hz: Frequency of that pitch.
		cents: Deviation of f0 from it (positive = sharp).
	"""

	f0: float
	a4: float
	midi: float
	nearest_pitch: vocalprism.pitch.NoteName
	nearest_pitch_hz: float
	cents: float


@dataclasses.dataclass(frozen=True)
class Frameworks:

	pythagorean: vocalprism.frameworks.pythagorean.PythagoreanResult
	vedic: vocalprism.frameworks.vedic.VedicResult
	gregorian: vocalprism.frameworks.gregorian.GregorianResult
	western: vocalprism.frameworks.western.WesternResult
	tibetan: vocalprism.frameworks.tibetan.TibetanResult
	neuroscience: vocalprism.frameworks.neuroscience.NeuroscienceResult


@dataclasses.dataclass(frozen=True)
class Narrative:

	short: str
	medium: str


@dataclasses.dataclass(frozen=True)
class PrismResult:

	input: PitchInfo
	scale: typing.Tuple[vocalprism.scale.ScaleDegree, ...]
	frameworks: Frameworks
	narrative: Narrative


def validate_f0 (f0: typing.Any) -> float:

	"""Check that ``f0`` is usable and return it as a float.

	Raises:
		DomainError: If ``f0`` is not a real number (booleans included),
			is NaN or infinite, or lies outside 50-1000 Hz.
	"""

	if isinstance(f0, bool) or not isinstance(f0, numbers.Real):
		raise DomainError(f"f0 must be a number between {MIN_F0:g} and {MAX_F0:g} Hz, got {f0!r}")

	value = float(f0)

	if not math.isfinite(value) or not MIN_F0 <= value <= MAX_F0:
		raise DomainError(f"f0 must be a number between {MIN_F0:g} and {MAX_F0:g} Hz, got {f0!r}")

	return value


def validate_a4 (a4: typing.Any) -> float:

	"""Check that the reference pitch is a positive finite number and return it as a float."""

	if isinstance(a4, bool) or not isinstance(a4, numbers.Real) or not math.isfinite(a4) or a4 <= 0:
		raise DomainError(f"a4 must be a positive number of Hz, got {a4!r}")

	return float(a4)


def pitch_info (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> PitchInfo:

	nearest_hz = vocalprism.pitch.freq_to_nearest_standard(f0, a4)

	return PitchInfo(
		f0=f0,
		a4=a4,
		midi=vocalprism.pitch.freq_to_midi(f0, a4),
		nearest_pitch=vocalprism.pitch.freq_to_note_name(f0, a4),
		nearest_pitch_hz=nearest_hz,
		cents=vocalprism.pitch.cents_between(f0, nearest_hz),
	)


def generate_narrative (info: PitchInfo, frameworks: Frameworks) -> Narrative:

	"""Write the short and medium summaries from selected analyzer outputs."""

	f0 = vocalprism.pitch.format_hz(info.f0)
	nearest = str(info.nearest_pitch)
	vocal = frameworks.western.vocal_category.category
	mode = frameworks.gregorian.mode

	short = f"{vocal} voice at {f0} Hz ({nearest}), {mode.mode} mode."

	medium = (
		f"At {f0} Hz, your fundamental frequency aligns nearest to {nearest} "
		f"({vocalprism.pitch.format_cents(info.cents)} from standard). "
		f"In the Vedic tradition, this is your Sa, your home note, sitting in "
		f"{frameworks.vedic.saptak.name}. "
		f"The Gregorian monks would have called this {mode.mode}: {mode.character.lower()}. "
		f"Your natural key is {frameworks.western.key_signature.key}."
	)

	return Narrative(short=short, medium=medium)


def calculate_prism (f0: typing.Any, a4: float = vocalprism.pitch.DEFAULT_A4) -> PrismResult:

	"""Run the complete analysis for one fundamental frequency.

	Parameters:
		f0: Fundamental frequency in Hz, 50-1000 inclusive.
		a4: Reference pitch used for note names and cent deviations. Just
			intonation ratios are always applied to f0 itself.

	Returns:
		A frozen :class:`PrismResult`.

	Raises:
		DomainError: If ``f0`` is not a finite number in range, or ``a4`` is
			not a positive finite number. No work is done before validation.
	"""

	value = validate_f0(f0)
	a4 = validate_a4(a4)

	logger.debug(f"Calculating prism for f0={value} Hz (A4={a4} Hz)")

	info = pitch_info(value, a4)
	scale = vocalprism.scale.generate_scale(value, a4)

	frameworks = Frameworks(
		pythagorean=vocalprism.frameworks.pythagorean.analyze_pythagorean(value, a4),
		vedic=vocalprism.frameworks.vedic.analyze_vedic(value, scale, a4),
		gregorian=vocalprism.frameworks.gregorian.analyze_gregorian(value, a4),
		western=vocalprism.frameworks.western.analyze_western(value, a4),
		tibetan=vocalprism.frameworks.tibetan.analyze_tibetan(value, a4),
		neuroscience=vocalprism.frameworks.neuroscience.analyze_neuroscience(value),
	)

	return PrismResult(
		input=info,
		scale=scale,
		frameworks=frameworks,
		narrative=generate_narrative(info, frameworks),
	)


def to_dict (obj: typing.Any) -> typing.Any:

	"""Convert a result (or any part of one) into JSON-ready builtins.

	Dataclasses become dicts keyed by field name, tuples become lists, note
	names become strings like ``"E3"``, ratios gain a ``label`` and
	infinite bounds become ``None``.
	"""

	if isinstance(obj, vocalprism.pitch.NoteName):
		return str(obj)

	if isinstance(obj, vocalprism.ratios.Ratio):
		return {
			"numerator": obj.numerator,
			"denominator": obj.denominator,
			"label": obj.label,
			"decimal": obj.decimal,
			"cents": obj.cents,
		}

	if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
		return {field.name: to_dict(getattr(obj, field.name)) for field in dataclasses.fields(obj)}

	if isinstance(obj, (list, tuple)):
		return [to_dict(item) for item in obj]

	if isinstance(obj, dict):
		return {key: to_dict(value) for key, value in obj.items()}

	if isinstance(obj, float) and math.isinf(obj):
		return None

	return obj
