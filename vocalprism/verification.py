"""Self-checks of the pitch kernel and ratio tables against known constants."""

import dataclasses
import logging
import typing

import vocalprism.pitch
import vocalprism.ratios


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class VerificationCheck:

	description: str
	expected: float
	actual: float
	tolerance: float
	passed: bool


@dataclasses.dataclass(frozen=True)
class F0For432:

	"""The f0 that puts 432 Hz on one shuddh degree."""

	code: str
	svara: str
	ratio: vocalprism.ratios.Ratio
	f0: float


def _check (description: str, expected: float, actual: float, tolerance: float) -> VerificationCheck:

	return VerificationCheck(
		description=description,
		expected=expected,
		actual=actual,
		tolerance=tolerance,
		passed=abs(actual - expected) < tolerance,
	)


def verify_math () -> typing.Tuple[VerificationCheck, ...]:

	"""Run the nine arithmetic checks.

	Each check compares a computed value with a published constant within a
	small tolerance. The function never raises; inspect ``passed`` or use
	:func:`all_passed`.
	"""

	return (
		_check("A4 (440 Hz) -> MIDI 69", 69, vocalprism.pitch.freq_to_midi(440, 440), 0.0001),
		_check("MIDI 69 -> 440 Hz", 440, vocalprism.pitch.midi_to_freq(69, 440), 0.0001),
		_check("Octave (2:1) -> 1200 cents", 1200, vocalprism.pitch.ratio_to_cents(2), 0.0001),
		_check("Perfect 5th (3:2) -> 701.96 cents", 701.96, vocalprism.pitch.ratio_to_cents(3 / 2), 0.01),
		_check("Just Major 3rd (5:4) -> 386.31 cents", 386.31, vocalprism.pitch.ratio_to_cents(5 / 4), 0.01),
		_check("ET Major 3rd -> 400 cents", 400, vocalprism.pitch.ratio_to_cents(2 ** (4 / 12)), 0.0001),
		_check(
			"Syntonic comma (81:64 vs 5:4) -> 21.51 cents",
			21.51,
			vocalprism.pitch.ratio_to_cents(81 / 64) - vocalprism.pitch.ratio_to_cents(5 / 4),
			0.01,
		),
		_check("432/240 = 9/5 (minor 7th)", 9 / 5, 432 / 240, 0.0001),
		_check("f0 for 432 Hz as Ni (15:8)", 230.4, 432 / (15 / 8), 0.01),
	)


def all_passed (checks: typing.Iterable[VerificationCheck]) -> bool:

	"""True when every check passed. Failures are logged as warnings."""

	ok = True

	for check in checks:
		if not check.passed:
			logger.warning(f"Verification failed: {check.description} (expected {check.expected}, got {check.actual})")
			ok = False

	return ok


def find_f0_for_432 () -> typing.Tuple[F0For432, ...]:

	"""For each shuddh degree, the f0 whose scale places 432 Hz on that degree.

	Example:
		```python
		{entry.code: entry.f0 for entry in find_f0_for_432()}["M7"]  # 230.4
		```
	"""

	results = []

	for code in vocalprism.ratios.SHUDDH_SCALE:
		interval = vocalprism.ratios.JUST_INTONATION_RATIOS[code]
		results.append(F0For432(
			code=code,
			svara=interval.svara,
			ratio=interval.ratio,
			f0=432 / interval.ratio.decimal,
		))

	return tuple(results)
