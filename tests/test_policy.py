"""Tests for ProviderPolicy and the exclusion predicate helpers."""

import unittest

from channel_listings.models import Channel, CustomTask, ProviderTask, StandardTask
from channel_listings.policy import (
    ProviderPolicy,
    any_of,
    number_contains,
    number_in_range,
    number_startswith,
)


async def _no_extract(page):
    return []


class TestProviderPolicy(unittest.TestCase):
    """Verify naming, exclusion and task mode handling."""

    def test_normalize_name_applies_override(self):
        policy = ProviderPolicy({"NICK": "NICKELODEON"})
        self.assertEqual(policy.normalize_name(" nick "), "NICKELODEON")
        self.assertEqual(policy.normalize_name("(HD) espn"), "ESPN")

    def test_should_exclude_defaults_to_false(self):
        self.assertFalse(ProviderPolicy().should_exclude(Channel("1", "A")))

    def test_apply_runs_pipeline(self):
        policy = ProviderPolicy({"NICK": "NICKELODEON"}, number_contains("-"))
        raw = [{"number": "1-2", "name": "Header"}, {"number": "3", "name": "nick"}]
        self.assertEqual(policy.apply(raw), [Channel("3", "NICKELODEON")])

    def test_apply_goes_through_policy_hooks(self):
        class PrefixPolicy(ProviderPolicy):
            def normalize_name(self, name):
                return "UK " + super().normalize_name(name)

            def should_exclude(self, channel):
                return channel.name == "UK RADIO"

        raw = [{"number": "1", "name": "bbc one"}, {"number": "2", "name": "radio"}]
        self.assertEqual(PrefixPolicy().apply(raw), [Channel("1", "UK BBC ONE")])

    def test_for_task_standard(self):
        task = ProviderTask(task_id="t", source_url="https://example.com", extractor=_no_extract)
        policy = ProviderPolicy.for_task(task)
        self.assertFalse(policy.is_custom)
        self.assertIsNone(policy.custom_runner)
        self.assertIsInstance(policy.mode, StandardTask)

    def test_for_task_custom(self):
        async def runner(task):
            return []

        task = ProviderTask(
            task_id="t",
            source_url="https://example.com",
            extractor=_no_extract,
            mode=CustomTask(runner),
        )
        policy = ProviderPolicy.for_task(task)
        self.assertTrue(policy.is_custom)
        self.assertIs(policy.custom_runner, runner)


class TestExclusionPredicates(unittest.TestCase):
    """Verify the predicate building blocks."""

    def test_number_contains(self):
        self.assertTrue(number_contains("-")(Channel("100-101", "X")))
        self.assertFalse(number_contains("-")(Channel("100", "X")))

    def test_number_startswith(self):
        self.assertTrue(number_startswith("0")(Channel("0101", "Radio")))
        self.assertFalse(number_startswith("0")(Channel("101", "BBC ONE")))

    def test_number_in_range(self):
        radio = number_in_range(900, 999)
        self.assertTrue(radio(Channel("901", "Radio")))
        self.assertFalse(radio(Channel("899", "TV")))
        self.assertFalse(radio(Channel("9A1", "Odd")))

    def test_any_of(self):
        rule = any_of(number_contains("-"), number_startswith("0"))
        self.assertTrue(rule(Channel("0101", "A")))
        self.assertTrue(rule(Channel("1-2", "A")))
        self.assertFalse(rule(Channel("12", "A")))


if __name__ == "__main__":
    unittest.main()
