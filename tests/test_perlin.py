import pytest

from mobakit.perlin import MT19937, PerlinNoise

SAMPLES = [(0.1, 0.2, 0.3), (1.7, -2.25, 3.5), (-4.9, 10.01, 0.75), (123.4, 56.7, -8.9)]


def test_mt19937_first_output_with_default_seed():
    assert MT19937()() == 3499211612


def test_mt19937_ten_thousandth_output():
    gen = MT19937()
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_mt19937_seed_is_taken_modulo_two_to_the_32():
    a = MT19937(2**32 + 7)
    b = MT19937(7)
    assert [a() for _ in range(5)] == [b() for _ in range(5)]


def test_mt19937_outputs_are_32_bit():
    gen = MT19937(42)
    assert all(0 <= gen() <= 0xFFFFFFFF for _ in range(1000))


def test_default_table_starts_with_reference_values():
    state = PerlinNoise().serialize()
    assert state[:6] == (151, 160, 137, 91, 90, 15)
    assert state[-1] == 180


@pytest.mark.parametrize("seed", [0, 1, 12345, 2**31])
def test_reseed_produces_permutation(seed):
    noise = PerlinNoise(seed)
    assert sorted(noise.serialize()) == list(range(256))


def test_same_seed_same_table_and_different_seed_differs():
    assert PerlinNoise(99).serialize() == PerlinNoise(99).serialize()
    assert PerlinNoise(99).serialize() != PerlinNoise(100).serialize()


def test_reseed_with_seed_matches_reseed_with_generator():
    by_seed = PerlinNoise(2024)
    by_generator = PerlinNoise(MT19937(2024))
    assert by_seed.serialize() == by_generator.serialize()


def test_reseed_with_custom_generator_gives_permutation():
    noise = PerlinNoise()
    noise.reseed(lambda: 0)
    assert sorted(noise.serialize()) == list(range(256))
    assert noise.serialize() != PerlinNoise().serialize()


def test_serialize_deserialize_round_trip():
    source = PerlinNoise(7)
    target = PerlinNoise()
    target.deserialize(source.serialize())
    assert target.serialize() == source.serialize()
    for x, y, z in SAMPLES:
        assert target.noise3d(x, y, z) == source.noise3d(x, y, z)


def test_deserialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([0] * 255)


def test_deserialize_rejects_non_byte_entries():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([256] + [0] * 255)


@pytest.mark.parametrize("point", [(0, 0, 0), (1, 2, 3), (-5, 7, 100)])
def test_noise_vanishes_on_lattice_points(point):
    assert PerlinNoise(3).noise3d(*point) == 0.0


@pytest.mark.parametrize("seed", [None, 5, 77])
def test_noise_in_range(seed):
    noise = PerlinNoise(seed)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.noise3d(x, y, z) <= 1.0
        assert -1.0 <= noise.noise2d(x, y) <= 1.0
        assert -1.0 <= noise.noise1d(x) <= 1.0


def test_noise_is_periodic_over_256():
    noise = PerlinNoise(11)
    assert noise.noise3d(0.25, 0.5, 0.75) == noise.noise3d(256.25, 0.5, 0.75)
    assert noise.noise3d(0.25, 0.5, 0.75) == noise.noise3d(0.25, -255.5, 0.75)


def test_lower_dimensions_use_fixed_offsets():
    noise = PerlinNoise(8)
    assert noise.noise1d(1.3) == noise.noise3d(1.3, 0.12345, 0.34567)
    assert noise.noise2d(1.3, 2.1) == noise.noise3d(1.3, 2.1, 0.34567)


def test_remapped_noise_is_affine_in_plain_noise():
    noise = PerlinNoise(21)
    for x, y, z in SAMPLES:
        assert noise.noise3d_01(x, y, z) == pytest.approx(noise.noise3d(x, y, z) * 0.5 + 0.5)
        assert noise.noise2d_01(x, y) == pytest.approx(noise.noise2d(x, y) * 0.5 + 0.5)
        assert noise.noise1d_01(x) == pytest.approx(noise.noise1d(x) * 0.5 + 0.5)


def test_single_octave_equals_noise():
    noise = PerlinNoise(4)
    for x, y, z in SAMPLES:
        assert noise.octave1d(x, 1) == noise.noise1d(x)
        assert noise.octave2d(x, y, 1) == noise.noise2d(x, y)
        assert noise.octave3d(x, y, z, 1) == noise.noise3d(x, y, z)


def test_zero_octaves_is_zero():
    assert PerlinNoise(4).octave3d(0.3, 0.4, 0.5, 0) == 0.0


def test_two_octaves_add_doubled_frequency():
    noise = PerlinNoise(9)
    x, y = 0.3, 0.7
    expected = noise.noise2d(x, y) + 0.25 * noise.noise2d(2 * x, 2 * y)
    assert noise.octave2d(x, y, 2, 0.25) == pytest.approx(expected)


def test_clamped_octaves_stay_in_range():
    noise = PerlinNoise(13)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.octave1d_11(x, 8, 2.0) <= 1.0
        assert -1.0 <= noise.octave2d_11(x, y, 8, 2.0) <= 1.0
        assert -1.0 <= noise.octave3d_11(x, y, z, 8, 2.0) <= 1.0
        assert 0.0 <= noise.octave1d_01(x, 8, 2.0) <= 1.0
        assert 0.0 <= noise.octave2d_01(x, y, 8, 2.0) <= 1.0
        assert 0.0 <= noise.octave3d_01(x, y, z, 8, 2.0) <= 1.0


def test_clamped_octave_matches_unclamped_when_in_range():
    noise = PerlinNoise(13)
    raw = noise.octave3d(0.3, 0.4, 0.5, 1)
    assert -1.0 <= raw <= 1.0
    assert noise.octave3d_11(0.3, 0.4, 0.5, 1) == raw
    assert noise.octave3d_01(0.3, 0.4, 0.5, 1) == pytest.approx(raw * 0.5 + 0.5)


def test_normalized_single_octave_equals_noise():
    noise = PerlinNoise(17)
    for x, y, z in SAMPLES:
        assert noise.normalized_octave1d(x, 1) == noise.noise1d(x)
        assert noise.normalized_octave2d(x, y, 1) == noise.noise2d(x, y)
        assert noise.normalized_octave3d(x, y, z, 1) == noise.noise3d(x, y, z)


def test_normalized_octaves_in_range():
    noise = PerlinNoise(19)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.normalized_octave1d(x, 6) <= 1.0
        assert -1.0 <= noise.normalized_octave2d(x, y, 6) <= 1.0
        assert -1.0 <= noise.normalized_octave3d(x, y, z, 6) <= 1.0
        assert 0.0 <= noise.normalized_octave1d_01(x, 6) <= 1.0
        assert 0.0 <= noise.normalized_octave2d_01(x, y, 6) <= 1.0
        assert 0.0 <= noise.normalized_octave3d_01(x, y, z, 6) <= 1.0


def test_normalized_octave_divides_by_amplitude_sum():
    noise = PerlinNoise(23)
    raw = noise.octave3d(0.3, 1.1, 2.2, 3, 0.5)
    assert noise.normalized_octave3d(0.3, 1.1, 2.2, 3, 0.5) == pytest.approx(raw / 1.75)
    assert noise.normalized_octave3d_01(0.3, 1.1, 2.2, 3, 0.5) == pytest.approx(
        raw / 1.75 * 0.5 + 0.5
    )