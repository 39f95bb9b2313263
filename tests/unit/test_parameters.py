"""
Unit tests for Chunk and Parameters validation.
"""

import pytest

from cardstack.session import Chunk, ConfigurationError, InvalidChunk, InvalidSubset, Parameters


class TestChunk:

    def test_valid_chunk(self):
        chunk = Chunk(2, 3)
        assert chunk.index == 2
        assert chunk.count == 3
        assert str(chunk) == "2/3"

    @pytest.mark.parametrize("index,count", [(0, 1), (2, 1), (1, 0), (-2, 3)])
    def test_invalid_chunk_cannot_exist(self, index, count):
        with pytest.raises(InvalidChunk):
            Chunk(index, count)

    def test_invalid_chunk_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Chunk(5, 3)

    @pytest.mark.parametrize("text,expected", [
        ("1/1", Chunk(1, 1)),
        ("2/5", Chunk(2, 5)),
        (" 3 / 4 ", Chunk(3, 4)),
    ])
    def test_parse(self, text, expected):
        assert Chunk.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "2", "a/b", "1/2/3", "1-2"])
    def test_parse_malformed(self, text):
        with pytest.raises(InvalidChunk):
            Chunk.parse(text)

    def test_parse_out_of_range(self):
        with pytest.raises(InvalidChunk):
            Chunk.parse("4/3")

    def test_whole(self):
        assert Chunk.whole() == Chunk(1, 1)

    def test_chunk_is_immutable(self):
        chunk = Chunk(1, 2)
        with pytest.raises(AttributeError):
            chunk.index = 2


class TestParameters:

    def test_defaults(self):
        params = Parameters()
        assert params.shuffle is False
        assert params.subset is None
        assert params.chunk == Chunk(1, 1)
        assert params.review_mode is True
        assert params.validated is False

    @pytest.mark.parametrize("subset", [0, -1, -20])
    def test_non_positive_subset_rejected(self, subset):
        with pytest.raises(InvalidSubset) as exc_info:
            Parameters(subset=subset)
        assert exc_info.value.subset == subset

    def test_from_options(self):
        params = Parameters.from_options(shuffle=True, amount=5, chunk="2/4", blank=True)
        assert params.shuffle is True
        assert params.subset == 5
        assert params.chunk == Chunk(2, 4)
        assert params.review_mode is False

    def test_from_options_defaults(self):
        assert Parameters.from_options() == Parameters()

    def test_from_options_bad_chunk(self):
        with pytest.raises(InvalidChunk):
            Parameters.from_options(chunk="0/2")

    def test_validate_for_marks_validated(self):
        params = Parameters(subset=3)
        validated = params.validate_for(10)

        assert validated.validated is True
        assert params.validated is False
        assert validated.subset == 3

    def test_validate_for_allows_oversize_subset_and_chunks(self):
        validated = Parameters(subset=50, chunk=Chunk(4, 6)).validate_for(3)
        assert validated.validated is True
        assert validated.subset == 50

    def test_validate_for_negative_size(self):
        with pytest.raises(ValueError):
            Parameters().validate_for(-1)

    def test_parameters_are_immutable(self):
        params = Parameters()
        with pytest.raises(AttributeError):
            params.shuffle = True

    def test_describe(self):
        params = Parameters(shuffle=True, subset=5, chunk=Chunk(2, 3), review_mode=False)
        assert params.describe() == "shuffled, chunk 2/3, first 5, blank"
        assert Parameters().describe() == "review"
