"""OSC output for tone requests and prism summaries.

Messages are sent over UDP to a target host/port (default 127.0.0.1:9001)
so that a synth patch (Pure Data, Max, SuperCollider) can voice them.

Send Events
───────────
- ``/vocalprism/tone <frequency> <duration> <volume> <pan>``: One tone
- ``/vocalprism/prism <f0> <nearest> <cents>``: Summary of a prism result
"""

import logging
import time
import typing

import pythonosc.udp_client

import vocalprism.prism
import vocalprism.tones


logger = logging.getLogger(__name__)


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9001

TONE_ADDRESS = "/vocalprism/tone"
PRISM_ADDRESS = "/vocalprism/prism"


class ToneSender:

	"""Sends tone requests as OSC messages."""

	def __init__ (
		self,
		host: str = DEFAULT_HOST,
		port: int = DEFAULT_PORT,
		sleep: typing.Optional[typing.Callable[[float], None]] = None
	) -> None:

		self._host = host
		self._port = port
		self._sleep = sleep or time.sleep
		self._client = pythonosc.udp_client.SimpleUDPClient(host, port)

		logger.info(f"OSC sending to {host}:{port}")


	def send (self, address: str, *args: typing.Any) -> None:

		"""Send an OSC message.

		Raises:
			OSError: If the datagram cannot be sent (logged, then re-raised).
		"""

		try:
			self._client.send_message(address, list(args))
		except OSError as e:
			logger.error(f"OSC send error: {e}")
			raise


	def send_tone (self, tone: vocalprism.tones.ToneRequest) -> None:

		self.send(TONE_ADDRESS, float(tone.frequency), float(tone.duration), float(tone.volume), float(tone.pan))


	def send_tones (self, tones: typing.Sequence[vocalprism.tones.ToneRequest], realtime: bool = True) -> None:

		"""
		Send every tone in start order.

		With ``realtime`` the sender waits until each tone's start offset
		before sending it; otherwise all messages go out at once.
		"""

		elapsed = 0.0

		for tone in sorted(tones, key=lambda t: t.start):

			if realtime and tone.start > elapsed:
				self._sleep(tone.start - elapsed)
				elapsed = tone.start

			self.send_tone(tone)

		logger.debug(f"Sent {len(tones)} tones to {self._host}:{self._port}")


	def send_prism (self, result: vocalprism.prism.PrismResult) -> None:

		info = result.input

		self.send(PRISM_ADDRESS, float(info.f0), str(info.nearest_pitch), float(info.cents))
