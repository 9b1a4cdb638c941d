#!/usr/bin/env python3
"""
Unit tests for the five auto-score factors.
"""

import unittest
from datetime import date, datetime, timedelta, timezone

from core.scorer import factors
from tests import FIXED_NOW


class TestExperienceMatch(unittest.TestCase):
    """Ordinal comparison on Débutant < Intermédiaire < Senior."""

    def test_candidate_at_or_above_job_level_scores_full(self):
        levels = ['Débutant', 'Intermédiaire', 'Senior']
        for job_rank, job_level in enumerate(levels):
            for candidate_level in levels[job_rank:]:
                with self.subTest(job=job_level, candidate=candidate_level):
                    self.assertEqual(factors.experience_match(job_level, candidate_level), 25)

    def test_one_level_below(self):
        self.assertEqual(factors.experience_match('Senior', 'Intermédiaire'), 15)
        self.assertEqual(factors.experience_match('Intermédiaire', 'Débutant'), 15)

    def test_two_levels_below(self):
        self.assertEqual(factors.experience_match('Senior', 'Débutant'), 5)

    def test_job_without_level_is_flat_ten(self):
        self.assertEqual(factors.experience_match(None, 'Senior'), 10)
        self.assertEqual(factors.experience_match('', 'Débutant'), 10)
        self.assertEqual(factors.experience_match(None, None), 10)

    def test_missing_candidate_level_ranks_as_intermediate(self):
        self.assertEqual(factors.experience_match('Intermédiaire', None), 25)
        self.assertEqual(factors.experience_match('Senior', None), 15)

    def test_unknown_levels_rank_as_intermediate(self):
        self.assertEqual(factors.experience_match('Expert', 'Débutant'), 15)
        self.assertEqual(factors.experience_match('Senior', 'Guru'), 15)


class TestSkillsMatch(unittest.TestCase):
    """Bidirectional case-insensitive substring matching."""

    def test_all_skills_matched(self):
        self.assertEqual(factors.skills_match(['Python', 'SQL'], ['python', 'sql', 'Docker']), 30)

    def test_substring_matches_both_ways(self):
        # candidate "react" is inside "React.js"; job "Postgres" is inside "PostgreSQL"
        self.assertEqual(factors.skills_match(['React.js', 'Postgres'], ['react', 'PostgreSQL']), 30)

    def test_partial_match_rounds(self):
        # 1 of 3 -> 10
        self.assertEqual(factors.skills_match(['Python', 'Go', 'Rust'], ['Python']), 10)
        # 2 of 3 -> 20
        self.assertEqual(factors.skills_match(['Python', 'Go', 'Rust'], ['Python', 'Go']), 20)
        # 1 of 4 -> 7.5 rounds half up to 8
        self.assertEqual(factors.skills_match(['A1', 'B2', 'C3', 'D4'], ['a1']), 8)

    def test_no_match(self):
        self.assertEqual(factors.skills_match(['Java'], ['Excel']), 0)

    def test_empty_or_missing_lists_are_flat_fifteen(self):
        self.assertEqual(factors.skills_match([], ['Python']), 15)
        self.assertEqual(factors.skills_match(['Python'], []), 15)
        self.assertEqual(factors.skills_match(None, None), 15)

    def test_blank_entries_do_not_match_everything(self):
        self.assertEqual(factors.skills_match(['Java'], ['', '  ']), 15)
        self.assertEqual(factors.skills_match(['Java', ''], ['Excel']), 0)

    def test_order_does_not_change_result(self):
        job = ['Python', 'Docker', 'Kubernetes', 'AWS']
        candidate = ['aws', 'python', 'Terraform']
        expected = factors.skills_match(job, candidate)
        self.assertEqual(factors.skills_match(list(reversed(job)), candidate), expected)
        self.assertEqual(factors.skills_match(job, list(reversed(candidate))), expected)
        self.assertEqual(
            len(factors.matched_skills(job, candidate)),
            len(factors.matched_skills(list(reversed(job)), list(reversed(candidate))))
        )


class TestAvailability(unittest.TestCase):
    """Days until the candidate can start, rounded up."""

    def test_absent_date_assumes_soon(self):
        self.assertEqual(factors.availability_score(None, FIXED_NOW), 12)
        self.assertEqual(factors.availability_score('', FIXED_NOW), 12)

    def test_unparsable_date_is_treated_as_absent(self):
        self.assertEqual(factors.availability_score('next spring', FIXED_NOW), 12)

    def test_already_available(self):
        self.assertEqual(factors.availability_score(FIXED_NOW - timedelta(days=3), FIXED_NOW), 15)
        self.assertEqual(factors.availability_score(FIXED_NOW, FIXED_NOW), 15)

    def test_brackets(self):
        cases = [
            (1, 12),
            (30, 12),
            (31, 8),
            (60, 8),
            (61, 3),
            (365, 3),
        ]
        for days, expected in cases:
            with self.subTest(days=days):
                available = FIXED_NOW + timedelta(days=days)
                self.assertEqual(factors.availability_score(available, FIXED_NOW), expected)

    def test_partial_days_round_up(self):
        # 30 days and one hour away counts as 31 days
        available = FIXED_NOW + timedelta(days=30, hours=1)
        self.assertEqual(factors.days_until(available, FIXED_NOW), 31)
        self.assertEqual(factors.availability_score(available, FIXED_NOW), 8)

    def test_accepts_iso_strings_and_dates(self):
        self.assertEqual(factors.days_until('2026-01-20', FIXED_NOW), 5)
        self.assertEqual(factors.days_until(date(2026, 1, 20), FIXED_NOW), 5)
        self.assertEqual(factors.days_until('2026-01-20T12:00:00+00:00', FIXED_NOW), 5)

    def test_naive_datetimes_are_utc(self):
        naive_now = datetime(2026, 1, 15, 12, 0, 0)
        self.assertEqual(factors.days_until('2026-01-16T12:00:00', naive_now), 1)
        self.assertEqual(
            factors.days_until(datetime(2026, 1, 16, 12, 0, tzinfo=timezone.utc), naive_now), 1
        )


class TestSalaryFit(unittest.TestCase):
    """Expectation "Nk" against range "Nk - Mk"."""

    JOB_RANGE = "40k - 55k €"

    def test_within_range(self):
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "45k"), 15)
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "40k"), 15)
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "55k"), 15)

    def test_within_ten_percent_of_max(self):
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "60k"), 10)

    def test_far_above_range(self):
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "70k"), 3)

    def test_absent_or_unparsable_is_flat_ten(self):
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, None), 10)
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "negotiable"), 10)
        self.assertEqual(factors.salary_fit(None, "45k"), 10)
        self.assertEqual(factors.salary_fit("competitive", "45k"), 10)
        # A single value is not a range
        self.assertEqual(factors.salary_fit("50k", "45k"), 10)

    def test_below_minimum_is_not_penalized(self):
        # Known asymmetry: asking far less than the range lands in the "close" bracket
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "20k"), 10)

    def test_parsers(self):
        self.assertEqual(factors.parse_salary_expectation("45k"), 45000)
        self.assertIsNone(factors.parse_salary_expectation("45000"))
        self.assertEqual(factors.parse_salary_range("40k-55k"), (40000, 55000))
        self.assertEqual(factors.parse_salary_range("Salaire: 40k - 55k EUR"), (40000, 55000))
        self.assertIsNone(factors.parse_salary_range(""))

    def test_uppercase_k_is_not_recognized(self):
        self.assertIsNone(factors.parse_salary_expectation("45K"))
        self.assertIsNone(factors.parse_salary_range("40K - 55K"))
        self.assertEqual(factors.salary_fit(self.JOB_RANGE, "45K"), 10)


class TestApplicationQuality(unittest.TestCase):
    """Additive completeness bonus capped at 15."""

    def test_cover_letter_cv_and_phone(self):
        score = factors.application_quality("x" * 150, "/uploads/cv.pdf", None, "+33600000000")
        self.assertEqual(score, 12)

    def test_everything_present_caps_at_fifteen(self):
        score = factors.application_quality("x" * 150, "cv.pdf", "motivation.pdf", "0600000000")
        self.assertEqual(score, 15)

    def test_cover_letter_must_exceed_threshold(self):
        self.assertEqual(factors.application_quality("x" * 100, None, None, None), 0)
        self.assertEqual(factors.application_quality("x" * 101, None, None, None), 5)

    def test_custom_threshold(self):
        self.assertEqual(
            factors.application_quality("x" * 50, None, None, None, cover_letter_min_length=40), 5
        )

    def test_empty_application(self):
        self.assertEqual(factors.application_quality(None, None, None, None), 0)
        self.assertEqual(factors.application_quality("", "", "", ""), 0)


if __name__ == '__main__':
    unittest.main()
