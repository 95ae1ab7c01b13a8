from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from versioner.version.model import PARTS, SemanticVersion, adjust_part, format_version, parse_version, try_parse_version

_numbers = st.integers(min_value=0, max_value=10**12)
_builds = st.none() | st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\r\n"),
    min_size=1,
    max_size=24,
)
_versions = st.builds(SemanticVersion, _numbers, _numbers, _numbers, _builds)
_parts = st.sampled_from(PARTS)
_directions = st.sampled_from(("up", "down"))


@pytest.mark.unit
@given(_versions)
def test_parse_inverts_format(version: SemanticVersion) -> None:
    assert parse_version(format_version(version)) == version


@pytest.mark.unit
@given(st.from_regex(r"(0|[1-9][0-9]{0,8})\.(0|[1-9][0-9]{0,8})\.(0|[1-9][0-9]{0,8})(-[A-Za-z0-9.+-]{1,12})?", fullmatch=True))
def test_format_inverts_parse(raw: str) -> None:
    assert format_version(parse_version(raw)) == raw


@pytest.mark.unit
@given(st.lists(st.from_regex(r"[0-9]{1,3}", fullmatch=True), min_size=1, max_size=6).filter(lambda groups: len(groups) != 3))
def test_wrong_group_count_is_rejected(groups: list[str]) -> None:
    assert try_parse_version(".".join(groups)) is None


@pytest.mark.unit
@given(_versions)
def test_major_up_resets_minor_and_patch(version: SemanticVersion) -> None:
    bumped = adjust_part(version, "major", "up")
    assert (bumped.major, bumped.minor, bumped.patch) == (version.major + 1, 0, 0)


@pytest.mark.unit
@given(_versions)
def test_minor_up_resets_patch_only(version: SemanticVersion) -> None:
    bumped = adjust_part(version, "minor", "up")
    assert (bumped.major, bumped.minor, bumped.patch) == (version.major, version.minor + 1, 0)


@pytest.mark.unit
@given(_versions)
def test_patch_up_leaves_major_and_minor(version: SemanticVersion) -> None:
    bumped = adjust_part(version, "patch", "up")
    assert (bumped.major, bumped.minor, bumped.patch) == (version.major, version.minor, version.patch + 1)


@pytest.mark.unit
@given(_versions, _parts)
def test_down_saturates_at_zero(version: SemanticVersion, part: str) -> None:
    lowered = adjust_part(version, part, "down")  # type: ignore[arg-type]
    if getattr(version, part) == 0:
        assert lowered == version
    else:
        assert getattr(lowered, part) == getattr(version, part) - 1


@pytest.mark.unit
@given(_versions, _parts, _directions)
def test_build_survives_every_adjustment(version: SemanticVersion, part: str, direction: str) -> None:
    assert adjust_part(version, part, direction).build == version.build  # type: ignore[arg-type]
