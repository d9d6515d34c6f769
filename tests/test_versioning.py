from semver import Version

from abletime.versioning import extract_version


def test_extracts_plain_version():
    assert extract_version("My Song 0.2.1.als") == Version(0, 2, 1)


def test_extracts_prerelease_and_build():
    version = extract_version("beat 1.4.0-rc.1+mix2 Project.als")
    assert version.major == 1
    assert version.minor == 4
    assert version.prerelease == "rc.1"
    assert version.build == "mix2"


def test_first_match_wins():
    assert extract_version("2.0.0 remix of 1.3.0.als") == Version(2, 0, 0)


def test_leading_zeros_are_not_part_of_a_version():
    # "01.2.3" is not valid; the search settles on "1.2.3".
    assert extract_version("take 01.2.3.als") == Version(1, 2, 3)


def test_missing_version():
    assert extract_version("sketch.als") is None
    assert extract_version("sketch 1.2.als") is None
