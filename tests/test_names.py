"""Tests for pagewright.pages.names — basename validation."""

import pytest

from pagewright._errors import InvalidNameError
from pagewright.pages.names import check_name, is_valid_name


class TestIsValidName:
    """is_valid_name — ASCII letters and digits only."""

    @pytest.mark.parametrize("name", ["Page0", "a", "0", "SubDir1SubDir0", "ABCxyz789"])
    def test_accepts_alphanumeric(self, name: str) -> None:
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", "sub_dir_0", "SubDir0_page0", "page-1", "page.md", "with space", ".hidden"],
    )
    def test_rejects_punctuation_and_empty(self, name: str) -> None:
        assert not is_valid_name(name)

    @pytest.mark.parametrize("name", ["Café", "Страница", "page٣", "ｐａｇｅ"])
    def test_rejects_non_ascii_alphanumerics(self, name: str) -> None:
        # str.isalnum() would accept all of these
        assert name.isalnum()
        assert not is_valid_name(name)


class TestCheckName:
    """check_name — raises with the offending name."""

    def test_valid_name_passes(self) -> None:
        check_name("Page0")

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(InvalidNameError) as excinfo:
            check_name("sub_dir_0")
        assert excinfo.value.name == "sub_dir_0"
        assert "sub_dir_0" in str(excinfo.value)
