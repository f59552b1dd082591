import typing

import pytest
import pythonosc.udp_client

import vocalprism.prism
import vocalprism.scale


class FakeUDPClient:

	"""Minimal OSC client stub that records outgoing messages."""

	instances: typing.List["FakeUDPClient"] = []

	def __init__ (self, host: str, port: int) -> None:

		"""Remember the target and register the instance for inspection."""

		self.host = host
		self.port = port
		self.sent: typing.List[typing.Tuple[str, typing.Any]] = []
		self.fail = False

		FakeUDPClient.instances.append(self)


	def send_message (self, address: str, value: typing.Any) -> None:

		"""Record the message, or raise if the test asked for a failure."""

		if self.fail:
			raise OSError("Network is unreachable")

		self.sent.append((address, value))


@pytest.fixture
def patch_osc (monkeypatch: pytest.MonkeyPatch) -> typing.Type[FakeUDPClient]:

	"""Replace python-osc's UDP client with the recording fake."""

	FakeUDPClient.instances = []
	monkeypatch.setattr(pythonosc.udp_client, "SimpleUDPClient", FakeUDPClient)

	return FakeUDPClient


@pytest.fixture
def prism_165 () -> vocalprism.prism.PrismResult:

	"""Full analysis of a 165 Hz voice (E3, just above A440's E3)."""

	return vocalprism.prism.calculate_prism(165.0)


@pytest.fixture
def scale_165 () -> typing.Tuple[vocalprism.scale.ScaleDegree, ...]:

	return vocalprism.scale.generate_scale(165.0)
