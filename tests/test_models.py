"""
Tests for lifelog

Test strategy:
1. Unit tests for models (months, keys, entries, month logs, statistics)
2. Storage and scanner tests against a throwaway corpus in tmp_path
3. Session tests with a fixed clock
"""

import pytest
from datetime import date
from pydantic import ValidationError

from lifelog.models.month_log import (
    DayOutOfRangeError,
    EMPTY_ENTRY_ART,
    EntryRecord,
    InvalidMonthNameError,
    InvalidYearError,
    Month,
    MonthLog,
    MonthLogRecord,
    MonthYear,
    MoodStatistics,
    Rating,
    RecordedEntry,
    UnrecordedEntry,
    SENTINEL_RATING,
    SENTINEL_TEXT,
)
from lifelog.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestMonth:
    """Tests for the Month enum."""

    def test_all_months_exist(self):
        """Test that the twelve capitalized names are the values."""
        expected = [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ]
        assert [month.value for month in Month] == expected

    def test_month_numbers(self):
        """Test month numbers follow the calendar."""
        assert Month.JANUARY.number == 1
        assert Month.OCTOBER.number == 10
        assert Month.DECEMBER.number == 12

    def test_from_name_is_case_sensitive(self):
        """Test that only the capitalized name is recognized."""
        assert Month.from_name("March") is Month.MARCH
        with pytest.raises(InvalidMonthNameError):
            Month.from_name("march")
        with pytest.raises(InvalidMonthNameError):
            Month.from_name("Smarch")

    def test_from_number(self):
        """Test number to month mapping and its bounds."""
        assert Month.from_number(2) is Month.FEBRUARY
        with pytest.raises(InvalidMonthNameError):
            Month.from_number(13)
        with pytest.raises(InvalidMonthNameError):
            Month.from_number(0)

    def test_ordering_follows_month_number(self):
        """Test months sort by calendar order, not alphabetically."""
        assert Month.MARCH < Month.OCTOBER
        assert Month.DECEMBER > Month.APRIL
        assert sorted([Month.OCTOBER, Month.APRIL, Month.AUGUST]) == [
            Month.APRIL, Month.AUGUST, Month.OCTOBER,
        ]

    @pytest.mark.parametrize("month,year,days", [
        (Month.FEBRUARY, 2024, 29),
        (Month.FEBRUARY, 2023, 28),
        (Month.FEBRUARY, 2000, 29),
        (Month.FEBRUARY, 1900, 28),
        (Month.APRIL, 2023, 30),
        (Month.OCTOBER, 2023, 31),
    ])
    def test_days_in(self, month, year, days):
        """Test Gregorian day counts including leap years."""
        assert month.days_in(year) == days


class TestMonthYear:
    """Tests for the month-year key."""

    def test_parse(self):
        """Test parsing a key string."""
        key = MonthYear.parse("October/2023")
        assert key.month is Month.OCTOBER
        assert key.year == 2023
        assert str(key) == "October/2023"

    def test_parse_rejects_bad_month(self):
        """Test that a bad month name is an InvalidMonthNameError."""
        with pytest.raises(InvalidMonthNameError):
            MonthYear.parse("Octember/2023")

    def test_parse_rejects_missing_separator(self):
        """Test that a key without a slash is rejected."""
        with pytest.raises(InvalidMonthNameError):
            MonthYear.parse("October 2023")

    @pytest.mark.parametrize("year", ["twenty", "-5", "0", "", "10000"])
    def test_parse_rejects_bad_year(self, year):
        """Test that a year that isn't a positive integer is rejected."""
        with pytest.raises(InvalidYearError):
            MonthYear.parse(f"October/{year}")

    def test_boundaries(self):
        """Test first and last day of a month."""
        key = MonthYear(Month.FEBRUARY, 2024)
        assert key.first_day == date(2024, 2, 1)
        assert key.last_day == date(2024, 2, 29)
        assert key.days == 29

    def test_from_date(self):
        """Test building a key from a date."""
        assert MonthYear.from_date(date(2023, 10, 19)) == MonthYear(Month.OCTOBER, 2023)


class TestEntries:
    """Tests for the entry variants."""

    def test_unrecorded_is_default(self):
        """Test that a blank entry is the default."""
        assert UnrecordedEntry().is_default is True
        assert UnrecordedEntry() == UnrecordedEntry()

    def test_recorded_is_not_default(self):
        """Test that a written entry is not the default."""
        entry = RecordedEntry(rating=1, text="good day")
        assert entry.is_default is False
        assert entry.rating == 1
        assert entry.text == "good day"

    def test_recorded_render(self):
        """Test the text shown for a written entry."""
        entry = RecordedEntry(rating=-1, text="rainy")
        assert entry.render() == "rating: -1\n\nrainy"

    def test_unrecorded_render(self):
        """Test the placeholder shown for an empty day."""
        assert "wow, such empty" in UnrecordedEntry().render()

    def test_entries_are_immutable(self):
        """Test entries are replaced, not edited."""
        entry = RecordedEntry(rating=1, text="good day")
        with pytest.raises(ValidationError):
            entry.rating = 2

    def test_rating_labels(self):
        """Test the labels offered for each rating."""
        assert Rating.AWESOME.label == "+2 (awesome)"
        assert Rating.OKAY.label == " 0 (okay)"
        assert Rating.HORRIBLE.label == "-2 (horrible)"
        assert [int(rating) for rating in Rating] == [2, 1, 0, -1, -2]


class TestMonthLog:
    """Tests for the MonthLog model."""

    @pytest.mark.parametrize("month,year,days", [
        (Month.FEBRUARY, 2024, 29),
        (Month.FEBRUARY, 2023, 28),
        (Month.APRIL, 2023, 30),
        (Month.JANUARY, 2022, 31),
    ])
    def test_blank_entry_count(self, month, year, days):
        """Test a blank month log has one unrecorded entry per day."""
        log = MonthLog.blank(month, year)
        assert len(log.entries) == days
        assert all(entry.is_default for entry in log.entries)

    def test_wrong_entry_count_rejected(self):
        """Test the entry count must match the calendar."""
        with pytest.raises(ValidationError, match="has 30 days"):
            MonthLog(
                month=Month.APRIL,
                year=2023,
                entries=[UnrecordedEntry() for _ in range(31)],
            )

    def test_month_year(self):
        """Test the key string of a month log."""
        log = MonthLog.blank(Month.AUGUST, 2022)
        assert log.month_year == "August/2022"
        assert log.key == MonthYear(Month.AUGUST, 2022)

    def test_set_then_get(self):
        """Test writing an entry and reading it back."""
        log = MonthLog.blank(Month.OCTOBER, 2023)
        log.set_entry(5, 2, "great")
        assert log.get_entry(5) == RecordedEntry(rating=2, text="great")
        assert log.get_entry(6).is_default

    def test_reset_keeps_slot(self):
        """Test resetting an entry leaves the slot in place."""
        log = MonthLog.blank(Month.OCTOBER, 2023)
        log.set_entry(5, 2, "great")
        log.reset_entry(5)
        assert log.get_entry(5) == UnrecordedEntry()
        assert len(log.entries) == 31

    @pytest.mark.parametrize("day", [0, -1, 32])
    def test_day_out_of_range(self, day):
        """Test days outside 1..31 raise DayOutOfRangeError."""
        log = MonthLog.blank(Month.OCTOBER, 2023)
        with pytest.raises(DayOutOfRangeError):
            log.get_entry(day)

    def test_last_day_in_range(self):
        """Test day 31 of a 31-day month is valid."""
        log = MonthLog.blank(Month.OCTOBER, 2023)
        assert log.get_entry(31).is_default


class TestStatistics:
    """Tests for mood statistics."""

    def test_counts(self):
        """Test ratings [2, 2, -1, unrecorded, unrecorded]."""
        log = MonthLog.blank(Month.FEBRUARY, 2023)
        log.set_entry(1, 2, "a")
        log.set_entry(2, 2, "b")
        log.set_entry(3, -1, "c")

        stats = log.statistics()
        assert stats.by_rating() == {2: 2, 1: 0, 0: 0, -1: 1, -2: 0}
        assert stats.unrecorded == 25
        assert stats.recorded == 3

    def test_out_of_range_ratings_fall_in_no_bucket(self):
        """Test a rating outside -2..2 is stored but not counted."""
        log = MonthLog.blank(Month.FEBRUARY, 2023)
        log.set_entry(1, 7, "off the scale")
        stats = log.statistics()
        assert stats.recorded == 0
        assert stats.unrecorded == 27

    def test_render(self):
        """Test the textual histogram."""
        stats = MoodStatistics(awesome=2, bad=1, unrecorded=2)
        assert stats.render() == (
            "+2 (awesome) - 2\n"
            "+1 - 0\n"
            "0 (okay) - 0\n"
            "-1 - 1\n"
            "-2 (horrible) - 0\n\n"
            "no data - 2"
        )


class TestFileFormat:
    """Tests for the on-disk record models."""

    def test_unrecorded_written_as_sentinel(self):
        """Test blank entries use the legacy sentinel on disk."""
        record = EntryRecord.from_entry(UnrecordedEntry())
        assert record.rating == SENTINEL_RATING
        assert record.text == SENTINEL_TEXT

    def test_sentinel_read_as_unrecorded(self):
        """Test the sentinel rating decodes to an unrecorded entry."""
        assert EntryRecord(rating=42, text="wow, such empty").to_entry() == UnrecordedEntry()

    def test_sentinel_rating_alone_is_recorded(self):
        """Test a rating of 42 with other text stays a recorded entry."""
        entry = EntryRecord(rating=42, text="the answer").to_entry()
        assert entry == RecordedEntry(rating=42, text="the answer")

    def test_empty_art_keeps_shape(self):
        """Test the placeholder art keeps its relative indentation."""
        lines = EMPTY_ENTRY_ART.splitlines()
        assert lines[3].index(",-.") == 2
        assert lines[4].index("/  )") == 1
        assert lines[5].startswith("(  (")

    def test_record_round_trip(self):
        """Test a month log survives conversion to the record and back."""
        log = MonthLog.blank(Month.APRIL, 2023)
        for day, rating in enumerate([-2, -1, 0, 1, 2], start=1):
            log.set_entry(day, rating, f"day {day}\nwith a second line")

        json_data = MonthLogRecord.from_month_log(log).model_dump_json()
        restored = MonthLogRecord.model_validate_json(json_data).to_month_log()
        assert restored.entries == log.entries
        assert restored.key == log.key

    def test_field_layout(self):
        """Test the JSON fields of a month file."""
        record = MonthLogRecord.from_month_log(MonthLog.blank(Month.FEBRUARY, 2023))
        data = record.model_dump()
        assert set(data) == {"month", "year", "entries"}
        assert data["month"] == "February"
        assert data["year"] == 2023
        assert data["entries"][0] == {"rating": 42, "text": "wow, such empty"}

    def test_unknown_fields_ignored(self):
        """Test that fields added by newer versions are ignored."""
        entries = ",".join(['{"rating": 42, "text": "wow, such empty", "mood": "?"}'] * 28)
        raw = f'{{"month": "February", "year": 2023, "tags": [], "entries": [{entries}]}}'
        log = MonthLogRecord.model_validate_json(raw).to_month_log()
        assert len(log.entries) == 28


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.MONTH_LOG_SAVED,
            description="Saved October/2023",
        )
        assert event.event_type == AuditEventType.MONTH_LOG_SAVED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.entry_updated("October/2023", day=5, rating=1)
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "entry_updated"
        assert log_dict["entity_key"] == "October/2023"
        assert log_dict["details"] == {"day": 5, "rating": 1}

    def test_corrupt_data_event_is_error(self):
        """Test corruption is logged at error severity."""
        event = AuditEventBuilder.corrupt_data_detected("October/2023", "bad json")
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "bad json"

    def test_empty_year_event_is_warning(self):
        """Test a skipped year directory is a warning."""
        event = AuditEventBuilder.empty_year_skipped(2021)
        assert event.severity == AuditSeverity.WARNING
        assert event.entity_key == "2021"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
