from __future__ import annotations

import pytest

from lib_log_syslog.domain.facility import Facility


def test_facility_has_24_contiguous_codes() -> None:
    assert len(Facility) == 24
    assert sorted(f.value for f in Facility) == list(range(24))


@pytest.mark.parametrize(
    "facility, code",
    [
        (Facility.KERN, 0),
        (Facility.USER, 1),
        (Facility.DAEMON, 3),
        (Facility.AUTHPRIV, 10),
        (Facility.LOCAL0, 16),
        (Facility.LOCAL7, 23),
    ],
)
def test_facility_codes_match_convention(facility: Facility, code: int) -> None:
    assert facility.value == code


@pytest.mark.parametrize("name", ["local3", "LOCAL3", "log_local3", " Local3 "])
def test_facility_from_name_is_forgiving(name: str) -> None:
    assert Facility.from_name(name) is Facility.LOCAL3


def test_facility_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown syslog facility"):
        Facility.from_name("local8")
