"""Tibetan / overtone framework - the physics of resonance.

Every voiced sound carries the harmonic series ``f0 * n``. This module lists
the first harmonics of f0 with their interval names, measures how far each
lands from the nearest 12-TET step, and matches f0 to a singing-bowl size.

A harmonic is flagged as deviant when it misses the equal-tempered grid by
at least ``DEVIANCE_THRESHOLD_CENTS``. Within the first 16 harmonics that
picks out exactly 7, 11, 13 and 14 (about -31, -49, +41 and -31 cents).

The 11th harmonic sits almost midway between two steps: 48.7 cents below
the tritone it is named after and 51.3 cents above the fourth. It is measured
against the nearer step, the tritone, so it reads as flat.
"""

import dataclasses
import typing

import vocalprism.bands
import vocalprism.pitch


DEFAULT_HARMONIC_COUNT = 16
DEVIANCE_THRESHOLD_CENTS = 25.0

INSIGHT = (
	"When you hum, you produce a fundamental plus overtones, a complex acoustic field rather "
	"than a single tone. Overtone singing (as in Tuvan throat singing) makes this explicit, "
	"but even ordinary humming produces the full series."
)

BOWL_CAVEAT = (
	"Traditional Tibetan bowls weren't tuned to any standard; they varied with their metals "
	"and crafting. Modern 'tuned' bowls are manufactured to meet Western expectations."
)

# (name, short name) for harmonics 1-16.
HARMONIC_INTERVALS: typing.Tuple[typing.Tuple[str, str], ...] = (
	("Fundamental", "P1"),
	("Octave", "P8"),
	("Perfect Fifth + Octave", "P5+P8"),
	("Double Octave", "2×P8"),
	("Major Third + 2 Octaves", "M3+2×P8"),
	("Perfect Fifth + 2 Octaves", "P5+2×P8"),
	("Flat Seventh + 2 Octaves", "m7+2×P8"),
	("Triple Octave", "3×P8"),
	("Major Second + 3 Octaves", "M2+3×P8"),
	("Major Third + 3 Octaves", "M3+3×P8"),
	("Tritone + 3 Octaves", "TT+3×P8"),
	("Perfect Fifth + 3 Octaves", "P5+3×P8"),
	("Minor Sixth + 3 Octaves", "m6+3×P8"),
	("Flat Seventh + 3 Octaves", "m7+3×P8"),
	("Major Seventh + 3 Octaves", "M7+3×P8"),
	("Quadruple Octave", "4×P8"),
)


@dataclasses.dataclass(frozen=True)
class Harmonic:

	"""
	One partial of the harmonic series above f0.

	Attributes:
		harmonic: Partial number n (1 = fundamental).
		hz: ``f0 * n``.
		note: Nearest equal-tempered pitch name.
		interval: Interval name above f0.
		interval_short: Abbreviated interval (``"m7+2×P8"``).
		cents: Size of the interval above f0 (``1200 * log2(n)``).
		deviation_cents: Distance from the nearest 12-TET step above f0
			(negative = flat).
		deviant: True when ``abs(deviation_cents) >= DEVIANCE_THRESHOLD_CENTS``.
	"""

	harmonic: int
	hz: float
	note: vocalprism.pitch.NoteName
	interval: str
	interval_short: str
	cents: float
	deviation_cents: float
	deviant: bool


	@property
	def annotation (self) -> typing.Optional[str]:

		"""Human-readable deviation note for deviant harmonics (``"~31¢ flat of 12-TET"``)."""

		if not self.deviant:
			return None

		direction = "sharp" if self.deviation_cents > 0 else "flat"

		return f"~{abs(vocalprism.pitch.round_half_up(self.deviation_cents))}¢ {direction} of 12-TET"


@dataclasses.dataclass(frozen=True)
class TibetanResult:

	bowl_equivalent: vocalprism.bands.BowlSize
	overtones: typing.Tuple[Harmonic, ...]
	bowl_caveat: str
	insight: str


	@property
	def deviant_harmonics (self) -> typing.Tuple[int, ...]:

		return tuple(h.harmonic for h in self.overtones if h.deviant)


def deviation_from_equal_temperament (cents: float) -> float:

	"""Signed distance from ``cents`` to the nearest multiple of 100."""

	return cents - 100 * vocalprism.pitch.round_half_up(cents / 100)


def harmonic (f0: float, n: int, a4: float = vocalprism.pitch.DEFAULT_A4) -> Harmonic:

	"""Describe the ``n``-th harmonic of ``f0``."""

	hz = f0 * n
	cents = vocalprism.pitch.ratio_to_cents(n)
	deviation = deviation_from_equal_temperament(cents)

	if n <= len(HARMONIC_INTERVALS):
		name, short = HARMONIC_INTERVALS[n - 1]
	else:
		name, short = f"Harmonic {n}", f"H{n}"

	return Harmonic(
		harmonic=n,
		hz=hz,
		note=vocalprism.pitch.freq_to_note_name(hz, a4),
		interval=name,
		interval_short=short,
		cents=cents,
		deviation_cents=deviation,
		deviant=abs(deviation) >= DEVIANCE_THRESHOLD_CENTS,
	)


def overtone_series (f0: float, count: int = DEFAULT_HARMONIC_COUNT, a4: float = vocalprism.pitch.DEFAULT_A4) -> typing.Tuple[Harmonic, ...]:

	"""Harmonics 1 to ``count`` of ``f0``."""

	return tuple(harmonic(f0, n, a4) for n in range(1, count + 1))


def analyze_tibetan (
	f0: float,
	a4: float = vocalprism.pitch.DEFAULT_A4,
	count: int = DEFAULT_HARMONIC_COUNT
) -> TibetanResult:

	"""Overtone reading of ``f0``.

	Example:
		```python
		result = analyze_tibetan(300.0)
		seventh = result.overtones[6]
		seventh.hz               # 2100.0
		seventh.annotation       # "~31¢ flat of 12-TET"
		result.deviant_harmonics # (7, 11, 13, 14)
		```
	"""

	return TibetanResult(
		bowl_equivalent=vocalprism.bands.BOWL_SIZES.nearest(f0).value,
		overtones=overtone_series(f0, count, a4),
		bowl_caveat=BOWL_CAVEAT,
		insight=INSIGHT,
	)
