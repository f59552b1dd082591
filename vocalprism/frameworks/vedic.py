"""Vedic / Indian classical framework - c. 200 BCE, the voice-centered tradition.

In Indian classical music Sa floats: it is set to the singer's own voice,
so f0 *is* Sa and every other svara is a ratio above it. This module places
the saptak (register) and chakra association of f0, scales the full
22-shruti system onto it, and shows how the personal scale's svaras sit on
shruti positions.
"""

import dataclasses
import logging
import typing

import vocalprism.bands
import vocalprism.pitch
import vocalprism.ratios
import vocalprism.scale


logger = logging.getLogger(__name__)


INSIGHT = (
	"The 432 Hz myth, debunked: 432 Hz is simply the minor 7th (Komal Ni, 9:5 ratio) "
	"when Sa is 240 Hz, a reference chosen because the math is clean. The tradition "
	"teaches that YOUR Sa is what matters, not some universal frequency."
)

# The Sa that puts 432 Hz on Komal Ni.
MYTH_SA_HZ = 240.0
MYTH_HZ = 432.0


@dataclasses.dataclass(frozen=True)
class SaptakReading:

	name: str
	description: str
	quality: str
	lower_hz: float
	upper_hz: float


@dataclasses.dataclass(frozen=True)
class ShrutiPitch:

	"""One shruti position scaled onto f0."""

	number: int
	region: str
	svara: str
	name: str
	ratio: vocalprism.ratios.Ratio
	cents: float
	hz: float
	note: vocalprism.pitch.NoteName


@dataclasses.dataclass(frozen=True)
class RagaReading:

	"""A raga's shruti membership and the frequencies it uses above f0."""

	key: str
	name: str
	description: str
	shrutis: typing.Tuple[int, ...]
	hz: typing.Tuple[float, ...]


@dataclasses.dataclass(frozen=True)
class SvaraPlacement:

	"""Which shruti position a degree of the personal scale occupies."""

	degree: int
	svara: str
	hz: float
	shruti: int


@dataclasses.dataclass(frozen=True)
class ShrutiSystem:

	scale: typing.Tuple[ShrutiPitch, ...]
	ragas: typing.Tuple[RagaReading, ...]
	svaras: typing.Tuple[SvaraPlacement, ...]


@dataclasses.dataclass(frozen=True)
class Myth432:

	"""432 Hz measured against a Sa of 240 Hz."""

	sa_hz: float
	hz: float
	ratio: float
	komal_ni: vocalprism.ratios.Ratio
	is_komal_ni: bool


@dataclasses.dataclass(frozen=True)
class VedicResult:

	saptak: SaptakReading
	chakra: vocalprism.bands.Chakra
	floating_sa: str
	shruti: ShrutiSystem
	myth_432: Myth432
	insight: str


def saptak_for (f0: float) -> SaptakReading:

	"""Register of ``f0``; frequencies outside 65-523 Hz take the nearest saptak."""

	band = vocalprism.bands.SAPTAKS.nearest(f0)

	return SaptakReading(
		name=band.value.name,
		description=band.value.description,
		quality=band.value.quality,
		lower_hz=band.lower,
		upper_hz=band.upper,
	)


def chakra_for (f0: float) -> vocalprism.bands.Chakra:

	return vocalprism.bands.CHAKRAS.nearest(f0).value


def shruti_scale (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> typing.Tuple[ShrutiPitch, ...]:

	"""All 23 shruti positions (Sa to Sa') scaled onto ``f0``."""

	pitches = []

	for shruti in vocalprism.ratios.SHRUTIS:
		hz = shruti.ratio.of(f0)
		pitches.append(ShrutiPitch(
			number=shruti.number,
			region=shruti.region,
			svara=shruti.svara,
			name=shruti.name,
			ratio=shruti.ratio,
			cents=shruti.ratio.cents,
			hz=hz,
			note=vocalprism.pitch.freq_to_note_name(hz, a4),
		))

	return tuple(pitches)


def raga_readings (f0: float) -> typing.Tuple[RagaReading, ...]:

	by_number = {s.number: s for s in vocalprism.ratios.SHRUTIS}

	return tuple(
		RagaReading(
			key=raga.key,
			name=raga.name,
			description=raga.description,
			shrutis=raga.shrutis,
			hz=tuple(by_number[n].ratio.of(f0) for n in raga.shrutis),
		)
		for raga in vocalprism.ratios.RAGA_SHRUTIS
	)


def place_svaras (scale: typing.Sequence[vocalprism.scale.ScaleDegree]) -> typing.Tuple[SvaraPlacement, ...]:

	"""Match each scale degree to the shruti position with the same ratio."""

	by_ratio = {(s.ratio.numerator, s.ratio.denominator): s.number for s in vocalprism.ratios.SHRUTIS}
	placements = []

	for degree in scale:
		key = (degree.ratio.numerator, degree.ratio.denominator)

		if key not in by_ratio:
			logger.debug(f"Scale degree {degree.svara} ({degree.ratio.label}) has no shruti position")
			continue

		placements.append(SvaraPlacement(degree=degree.degree, svara=degree.svara, hz=degree.hz, shruti=by_ratio[key]))

	return tuple(placements)


def myth_432 () -> Myth432:

	komal_ni = vocalprism.ratios.JUST_INTONATION_RATIOS["m7"].ratio
	ratio = MYTH_HZ / MYTH_SA_HZ

	return Myth432(
		sa_hz=MYTH_SA_HZ,
		hz=MYTH_HZ,
		ratio=ratio,
		komal_ni=komal_ni,
		is_komal_ni=abs(ratio - komal_ni.decimal) < 1e-4,
	)


def analyze_vedic (
	f0: float,
	scale: typing.Optional[typing.Sequence[vocalprism.scale.ScaleDegree]] = None,
	a4: float = vocalprism.pitch.DEFAULT_A4
) -> VedicResult:

	"""Vedic reading of ``f0``.

	Parameters:
		f0: Fundamental frequency, taken as Sa.
		scale: The personal scale from :func:`vocalprism.scale.generate_scale`.
			Generated here when not supplied.
		a4: Reference pitch used to name shruti frequencies.

	Example:
		```python
		result = analyze_vedic(165.0)
		result.saptak.name             # "Madhya Saptak"
		result.shruti.scale[13].hz     # 247.5 (Pa)
		```
	"""

	if scale is None:
		scale = vocalprism.scale.generate_scale(f0, a4)

	return VedicResult(
		saptak=saptak_for(f0),
		chakra=chakra_for(f0),
		floating_sa=f"Your f0 of {vocalprism.pitch.format_hz(f0)} Hz becomes your Sa, and everything else relates to that center.",
		shruti=ShrutiSystem(
			scale=shruti_scale(f0, a4),
			ragas=raga_readings(f0),
			svaras=place_svaras(scale),
		),
		myth_432=myth_432(),
		insight=INSIGHT,
	)
