"""Tests for commit ingestion and timestamp parsing."""

import unittest
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from yday.models.entities import TimeDirective
from yday.timeline.ingest import (
    ingest,
    is_header_line,
    parse_commit_line,
    parse_line,
    parse_standup_output,
)
from yday.timeline.timespan import resolve
from yday.utils.paths import repository_name
from yday.utils.timestamps import parse_date, parse_relative, parse_temporal_marker, parse_timestamp

# Sunday
NOW = datetime(2025, 8, 3, 12, 0, tzinfo=timezone.utc)


def get_fixture_text(name: str) -> str:
    """Read a test fixture file."""
    return (Path(__file__).parent / 'test_fixtures' / name).read_text(encoding='utf-8')


class TestTimestamps(unittest.TestCase):
    """Test absolute and relative temporal markers."""

    def test_iso_with_z(self):
        """Verify 'Z' suffix is read as UTC."""
        dt = parse_timestamp('2025-07-30T09:15:00Z')
        self.assertEqual(dt, datetime(2025, 7, 30, 9, 15, tzinfo=timezone.utc))

    def test_iso_with_offset_converts_to_utc(self):
        dt = parse_timestamp('2025-07-28T20:30:00-04:00')
        self.assertEqual(dt, datetime(2025, 7, 29, 0, 30, tzinfo=timezone.utc))

    def test_git_iso_format(self):
        """Verify git's --date=iso form is accepted."""
        dt = parse_timestamp('2025-07-28 18:30:00 -0400')
        self.assertEqual(dt, datetime(2025, 7, 28, 22, 30, tzinfo=timezone.utc))

    def test_naive_timestamp_is_utc(self):
        dt = parse_timestamp('2025-07-28T10:00:00')
        self.assertEqual(dt.tzinfo, timezone.utc)

    def test_invalid_timestamps(self):
        for text in (None, '', 'sometime', '2025-13-45'):
            self.assertIsNone(parse_timestamp(text))

    def test_relative_units(self):
        self.assertEqual(parse_relative('3 hours ago', NOW), NOW - timedelta(hours=3))
        self.assertEqual(parse_relative('1 minute ago', NOW), NOW - timedelta(minutes=1))
        self.assertEqual(parse_relative('45 seconds ago', NOW), NOW - timedelta(seconds=45))
        self.assertEqual(parse_relative('2 weeks ago', NOW), NOW - timedelta(days=14))
        self.assertEqual(parse_relative('1 month ago', NOW), NOW - timedelta(days=30))
        self.assertEqual(parse_relative('1 year ago', NOW), NOW - timedelta(days=365))

    def test_compound_relative(self):
        """Verify compound phrases add their parts."""
        dt = parse_relative('1 year, 2 months ago', NOW)
        self.assertEqual(dt, NOW - timedelta(days=365 + 60))

    def test_out_of_range_relative(self):
        """Verify markers reaching past the calendar are rejected, not raised."""
        self.assertIsNone(parse_relative('99999 years ago', NOW))
        self.assertIsNone(parse_temporal_marker('99999 years ago', NOW))

    def test_out_of_range_timestamp(self):
        """Verify a timestamp whose UTC form leaves the calendar is rejected."""
        self.assertIsNone(parse_timestamp('9999-12-31T23:30:00-05:00'))
        self.assertIsNone(parse_timestamp('0001-01-01 00:30:00 +0100'))

    def test_not_relative(self):
        for text in (None, '', 'ago', 'three hours ago', '2025-07-30T09:15:00Z'):
            self.assertIsNone(parse_relative(text, NOW))

    def test_temporal_marker_tries_both(self):
        self.assertEqual(parse_temporal_marker('1 day ago', NOW), NOW - timedelta(days=1))
        self.assertEqual(
            parse_temporal_marker('2025-07-30T09:15:00Z', NOW),
            datetime(2025, 7, 30, 9, 15, tzinfo=timezone.utc),
        )
        self.assertIsNone(parse_temporal_marker('sometime', NOW))

    def test_parse_date(self):
        self.assertEqual(parse_date('2025-07-01'), date(2025, 7, 1))
        self.assertIsNone(parse_date('not-a-date'))
        self.assertIsNone(parse_date(None))


class TestLineParsing(unittest.TestCase):
    """Test classification of individual lines."""

    def test_header_lines(self):
        self.assertTrue(is_header_line('/home/me/workspace/api'))
        self.assertTrue(is_header_line('~/workspace/api'))
        self.assertFalse(is_header_line('a1b2c3d - Fix (1 day ago) <Jane>'))

    def test_repository_name(self):
        self.assertEqual(repository_name('/home/me/workspace/api'), 'api')
        self.assertEqual(repository_name('/home/me/workspace/api/'), 'api')
        self.assertEqual(repository_name('~/code/web-app'), 'web-app')

    def test_commit_line(self):
        commit = parse_commit_line('a1b2c3d - Add login (3 hours ago) <Jane Doe>', NOW)

        self.assertEqual(commit.id, 'a1b2c3d')
        self.assertEqual(commit.message, 'Add login')
        self.assertEqual(commit.author, 'Jane Doe')
        self.assertEqual(commit.author_instant, NOW - timedelta(hours=3))

    def test_message_with_parentheses(self):
        """Verify the last parenthesised group is the marker."""
        commit = parse_commit_line('a1b2c3d - Fix bug (again) (2 days ago) <Jane>', NOW)
        self.assertEqual(commit.message, 'Fix bug (again)')
        self.assertEqual(commit.author_instant, NOW - timedelta(days=2))

    def test_parenthesised_tag_in_subject(self):
        """Verify an inner (word) <tag> pair does not hide the real marker and author."""
        line = 'a1b2c3d - Wrap (mobile) <nav> in container (2025-08-05T10:00:00+00:00) <Jane Doe>'
        commit = parse_commit_line(line, NOW)

        self.assertIsNotNone(commit)
        self.assertEqual(commit.message, 'Wrap (mobile) <nav> in container')
        self.assertEqual(commit.author, 'Jane Doe')
        self.assertEqual(commit.author_instant, datetime(2025, 8, 5, 10, 0, tzinfo=timezone.utc))

    def test_text_after_author_rejected(self):
        self.assertIsNone(parse_commit_line('a1b2c3d - Fix (1 day ago) <Jane> trailing', NOW))

    def test_malformed_lines(self):
        """Verify lines that do not fit are skipped."""
        lines = [
            '',
            'random text',
            'zzzzzzz - Not a hash (1 day ago) <Jane>',
            'a1b2c3d - Missing author (1 day ago)',
            'a1b2c3d - Bad marker (sometime) <Jane>',
            'No commits from Jane Doe during this period.',
        ]
        for line in lines:
            self.assertIsNone(parse_line(line, NOW), line)

    def test_parse_line_header(self):
        self.assertEqual(parse_line('  /home/me/workspace/api  ', NOW), 'api')

    def test_workspace_and_repos_headers(self):
        """Verify paths under a workspace or repos dir are headers even without a leading slash."""
        self.assertTrue(is_header_line('C:/Users/me/workspace/api'))
        self.assertTrue(is_header_line('mnt/repos/web'))
        self.assertEqual(parse_line('C:/Users/me/workspace/api', NOW), 'api')
        self.assertEqual(parse_line('mnt/repos/web', NOW), 'web')

    def test_commit_mentioning_workspace_is_commit(self):
        """Verify a commit subject naming /workspace/ is still read as a commit."""
        parsed = parse_line('a1b2c3d - Move files to /workspace/ root (1 hour ago) <Jane>', NOW)

        self.assertEqual(parsed.message, 'Move files to /workspace/ root')

    def test_commit_like_line_with_bad_marker_is_not_header(self):
        self.assertIsNone(parse_line('a1b2c3d - Tidy /repos/ (sometime) <Jane>', NOW))


class TestStandupOutput(unittest.TestCase):
    """Test grouping of whole log text."""

    def test_fixture_grouping(self):
        """Verify fixture groups into three repositories in order."""
        repos = parse_standup_output(get_fixture_text('standup_output.txt'), NOW)

        self.assertEqual([r.repository_name for r in repos], ['api', 'web', 'docs'])
        self.assertEqual(repos[0].commit_count, 3)
        self.assertEqual(repos[1].commit_count, 1)
        self.assertEqual(repos[2].commit_count, 1)

    def test_commits_before_header_dropped(self):
        text = 'a1b2c3d - Orphan (1 hour ago) <Jane>\n/w/api\nb2c3d4e - Kept (1 hour ago) <Jane>\n'
        repos = parse_standup_output(text, NOW)

        self.assertEqual(len(repos), 1)
        self.assertEqual(repos[0].commits[0].message, 'Kept')

    def test_repeated_header_appends(self):
        text = (
            '/w/api\n'
            'a1b2c3d - One (1 hour ago) <Jane>\n'
            '/w/web\n'
            'b2c3d4e - Two (1 hour ago) <Jane>\n'
            '/other/api\n'
            'c3d4e5f - Three (1 hour ago) <Jane>\n'
        )
        repos = parse_standup_output(text, NOW)

        self.assertEqual([r.repository_name for r in repos], ['api', 'web'])
        self.assertEqual([c.id for c in repos[0].commits], ['a1b2c3d', 'c3d4e5f'])

    def test_empty_text(self):
        self.assertEqual(parse_standup_output('', NOW), [])
        self.assertEqual(parse_standup_output(None, NOW), [])


class TestIngest(unittest.TestCase):
    """Test span filtering."""

    def test_fixture_last_seven_days(self):
        """Verify commits outside the span and empty repos are dropped."""
        span = resolve(TimeDirective.last_n_days(7), NOW)
        repos = ingest(get_fixture_text('standup_output.txt'), span)

        self.assertEqual([r.repository_name for r in repos], ['api', 'web'])
        self.assertEqual(repos[0].commit_count, 3)
        self.assertEqual(repos[1].commit_count, 1)

    def test_single_day_span(self):
        """Verify only Monday's commits survive, including the offset one."""
        span = resolve(TimeDirective.days_ago(6), NOW)
        repos = ingest(get_fixture_text('standup_output.txt'), span)

        self.assertEqual(len(repos), 1)
        self.assertEqual([c.id for c in repos[0].commits], ['a1b2c3d', 'b2c3d4e'])

    def test_relative_markers_anchor_to_span_now(self):
        """Verify relative markers count back from the span's reference instant."""
        span = resolve(TimeDirective.today(), NOW)
        text = '/w/api\na1b2c3d - Today (2 hours ago) <Jane>\nb2c3d4e - Earlier (1 day ago) <Jane>\n'
        repos = ingest(text, span)

        self.assertEqual(len(repos), 1)
        self.assertEqual([c.id for c in repos[0].commits], ['a1b2c3d'])

    def test_explicit_now_overrides_anchor(self):
        span = resolve(TimeDirective.today(), NOW)
        text = '/w/api\na1b2c3d - Later (1 hour ago) <Jane>\n'

        repos = ingest(text, span, now=NOW + timedelta(days=1))
        self.assertEqual(repos, [])

    def test_out_of_range_markers_skipped(self):
        """Verify one unrepresentable marker does not abort the whole ingest."""
        span = resolve(TimeDirective.today(), NOW)
        text = (
            '/w/api\n'
            'abc1234 - ok (99999 years ago) <J>\n'
            'abc1235 - far future (9999-12-31T23:30:00-05:00) <J>\n'
            'abc1236 - fine (1 hour ago) <J>\n'
        )
        repos = ingest(text, span)

        self.assertEqual(len(repos), 1)
        self.assertEqual([c.id for c in repos[0].commits], ['abc1236'])

    def test_tagged_subject_counted(self):
        span = resolve(TimeDirective.days_ago(1), NOW)
        text = '/w/web\na1b2c3d - Wrap (mobile) <nav> in container (2025-08-02T10:00:00Z) <Jane Doe>\n'

        repos = ingest(text, span)
        self.assertEqual(repos[0].commit_count, 1)

    def test_time_of_day_ignored(self):
        """Verify commits at both ends of a day are inside a one-day span."""
        span = resolve(TimeDirective.days_ago(1), NOW)
        text = (
            '/w/api\n'
            'a1b2c3d - Early (2025-08-02T00:00:00Z) <Jane>\n'
            'b2c3d4e - Late (2025-08-02T23:59:59.999000Z) <Jane>\n'
            'c3d4e5f - Next day (2025-08-03T00:00:00Z) <Jane>\n'
        )
        repos = ingest(text, span)

        self.assertEqual([c.id for c in repos[0].commits], ['a1b2c3d', 'b2c3d4e'])


if __name__ == '__main__':
    unittest.main()
