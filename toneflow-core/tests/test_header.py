import struct, unittest
from toneflow.wav.header import WavHeader

_FMT = "<4sI4s4sIHHIIHH4sI"


class TestHeader(unittest.TestCase):
    def test_invariants_for_any_length(self):
        for n in (0, 1, 2, 1000, 44100, 88200, 123457):
            h = WavHeader.for_samples(n)
            self.assertEqual(h.data_size, 2 * n)
            self.assertEqual(h.chunk_size, 36 + 2 * n)
            self.assertEqual(h.byte_rate, 88200)
            self.assertEqual(h.block_align, 2)
            self.assertEqual(h.byte_rate, h.sample_rate * h.block_align)

    def test_layout(self):
        raw = WavHeader.for_samples(44100).to_bytes()
        self.assertEqual(len(raw), 44)
        self.assertEqual(struct.calcsize(_FMT), 44)
        fields = struct.unpack(_FMT, raw)
        self.assertEqual(fields, (
            b"RIFF", 36 + 88200, b"WAVE", b"fmt ", 16, 1, 1, 44100, 88200, 2, 16, b"data", 88200,
        ))
        self.assertEqual(raw[0:4], b"RIFF")
        self.assertEqual(raw[8:12], b"WAVE")
        self.assertEqual(raw[36:40], b"data")
        self.assertEqual(raw[40:44], (88200).to_bytes(4, "little"))

    def test_empty(self):
        raw = WavHeader.for_samples(0).to_bytes()
        self.assertEqual(struct.unpack_from("<I", raw, 4)[0], 36)
        self.assertEqual(struct.unpack_from("<I", raw, 40)[0], 0)

    def test_too_large_for_riff(self):
        with self.assertRaises(ValueError):
            WavHeader.for_samples(2 ** 31).to_bytes()

    def test_rejects_negative_count(self):
        with self.assertRaises(ValueError):
            WavHeader.for_samples(-1)

    def test_bad_tag(self):
        with self.assertRaises(ValueError):
            WavHeader(chunk_size=36, data_size=0, riff_id=b"RIF").to_bytes()

    def test_frozen(self):
        h = WavHeader.for_samples(10)
        with self.assertRaises(AttributeError):
            h.data_size = 0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
