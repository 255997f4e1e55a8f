from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from community.utils.http import parse_user_id
from community.utils.timestamps import EPOCH, to_datetime


class ParseUserIdTestCase(SimpleTestCase):
    def test_valid_ids(self):
        self.assertEqual(parse_user_id("12"), 12)
        self.assertEqual(parse_user_id(" 7 "), 7)
        self.assertEqual(parse_user_id(3), 3)

    def test_invalid_ids(self):
        for raw in (None, "", "abc", "0", "-4", True, "1.5"):
            self.assertIsNone(parse_user_id(raw), raw)


class ToDatetimeTestCase(SimpleTestCase):
    def test_iso_with_z(self):
        self.assertEqual(
            to_datetime("2024-01-02T03:04:05Z"),
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt_timezone.utc),
        )

    def test_naive_is_utc(self):
        self.assertEqual(to_datetime(datetime(2024, 1, 1)).tzinfo, dt_timezone.utc)

    def test_epoch_seconds(self):
        self.assertEqual(to_datetime(0), datetime(1970, 1, 1, tzinfo=dt_timezone.utc))

    def test_missing_or_garbage(self):
        self.assertEqual(to_datetime(None), EPOCH)
        self.assertEqual(to_datetime("yesterday-ish"), EPOCH)
