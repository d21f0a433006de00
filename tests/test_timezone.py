import unittest
from datetime import datetime, timedelta, timezone
from importlib import resources
from unittest.mock import patch
from zoneinfo import ZoneInfo

import zoned_time
from zoned_time import NoDefaultZoneError, UnknownZoneError, ZoneContext
from zoned_time.registry import lookup


Y2K = datetime(2000, 1, 1, tzinfo=timezone.utc)


class ZoneContextTests(unittest.TestCase):
    def setUp(self):
        self.context = ZoneContext()

    def test_default_zone_starts_unset(self):
        self.assertIsNone(self.context.get_default_zone())

    def test_set_default_zone_returns_stored_zone(self):
        zone = self.context.set_default_zone('Hawaii')

        self.assertEqual(zone.name, 'Hawaii')
        self.assertIs(self.context.get_default_zone(), zone)

    def test_set_default_zone_accepts_numeric_offset(self):
        zone = self.context.set_default_zone(-10)

        self.assertEqual(zone, lookup('Hawaii'))

    def test_set_default_zone_accepts_zoneinfo_instance(self):
        tz = ZoneInfo('Asia/Tokyo')
        zone = self.context.set_default_zone(tz)

        self.assertIs(zone.tzinfo, tz)
        self.assertEqual(zone.name, 'Asia/Tokyo')
        self.assertEqual(zone.utc_offset, 9 * 3600)

    def test_resolve_zoneinfo_uses_table_offset(self):
        zone = self.context.resolve(ZoneInfo('Europe/Dublin'))

        self.assertEqual(zone.name, 'Europe/Dublin')
        self.assertEqual(zone.utc_offset, 0)

    def test_resolve_rejects_zoneinfo_without_key(self):
        with resources.files('tzdata.zoneinfo').joinpath('UTC').open('rb') as f:
            tz = ZoneInfo.from_file(f)

        self.assertIsNone(tz.key)
        with self.assertRaises(UnknownZoneError):
            self.context.resolve(tz)
        with self.assertRaises(UnknownZoneError):
            self.context.set_default_zone(tz)
        self.assertIsNone(self.context.get_default_zone())

    def test_constructor_sets_default_zone(self):
        context = ZoneContext('London')

        self.assertEqual(context.get_default_zone().name, 'London')

    def test_reset_default_zone_is_idempotent(self):
        self.context.set_default_zone('Hawaii')
        self.context.reset_default_zone()
        self.context.reset_default_zone()

        self.assertIsNone(self.context.get_default_zone())

    def test_failed_set_keeps_previous_default(self):
        self.context.set_default_zone('Hawaii')

        with self.assertRaises(UnknownZoneError):
            self.context.set_default_zone('Narnia/Nowhere')

        self.assertEqual(self.context.get_default_zone().name, 'Hawaii')

    def test_resolve_passes_handles_through_without_lookup(self):
        zone = self.context.resolve('Hawaii')

        with patch('zoned_time.registry.lookup') as mock_lookup:
            self.assertIs(self.context.resolve(zone), zone)
            self.assertIs(self.context.resolve(self.context.resolve(zone)), zone)

        mock_lookup.assert_not_called()

    def test_resolve_unknown_zone(self):
        with self.assertRaises(UnknownZoneError) as ctx:
            self.context.resolve('Narnia/Nowhere')

        self.assertEqual(ctx.exception.identifier, 'Narnia/Nowhere')

    def test_resolve_none_means_no_default(self):
        with self.assertRaises(NoDefaultZoneError):
            self.context.resolve(None)

    def test_resolve_rejects_other_types(self):
        with self.assertRaises(TypeError):
            self.context.resolve(['Hawaii'])
        with self.assertRaises(TypeError):
            self.context.resolve(True)

    def test_convert_to_zone_keeps_instant(self):
        result = self.context.convert_to_zone(Y2K, 'Hawaii')

        self.assertEqual(result, Y2K)
        self.assertEqual(result.replace(tzinfo=None), datetime(1999, 12, 31, 14, 0))
        self.assertEqual(result.utcoffset(), timedelta(hours=-10))
        self.assertEqual(result.isoformat(), '1999-12-31T14:00:00-10:00')

    def test_convert_to_zone_treats_naive_as_utc(self):
        result = self.context.convert_to_zone(datetime(2000, 1, 1), 'Alaska')

        self.assertEqual(result, Y2K)
        self.assertEqual(result.replace(tzinfo=None), datetime(1999, 12, 31, 15, 0))

    def test_convert_to_zone_applies_dst_offset(self):
        summer = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
        result = self.context.convert_to_zone(summer, 'Eastern Time (US & Canada)')

        self.assertEqual(result.hour, 8)
        self.assertEqual(result.utcoffset(), timedelta(hours=-4))

    def test_convert_to_zone_from_other_zone(self):
        tokyo_morning = datetime(2024, 1, 15, 9, 0, tzinfo=ZoneInfo('Asia/Tokyo'))
        result = self.context.convert_to_zone(tokyo_morning, 'London')

        self.assertEqual(result, tokyo_morning)
        self.assertEqual(result.replace(tzinfo=None), datetime(2024, 1, 15, 0, 0))

    def test_reinterpret_in_zone_keeps_wall_clock(self):
        result = self.context.reinterpret_in_zone(Y2K, 'Hawaii')

        self.assertEqual(result.replace(tzinfo=None), datetime(2000, 1, 1, 0, 0))
        self.assertEqual(result.utcoffset(), timedelta(hours=-10))
        self.assertEqual(
            result.astimezone(timezone.utc),
            datetime(2000, 1, 1, 10, 0, tzinfo=timezone.utc)
        )

    def test_reinterpret_in_zone_uses_own_fields_of_aware_values(self):
        tokyo_morning = datetime(2024, 1, 15, 9, 30, tzinfo=ZoneInfo('Asia/Tokyo'))
        result = self.context.reinterpret_in_zone(tokyo_morning, 'London')

        self.assertEqual(result, datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc))

    def test_reinterpret_ambiguous_time_takes_first_occurrence(self):
        repeated = datetime(2024, 11, 3, 1, 30)
        result = self.context.reinterpret_in_zone(repeated, 'Eastern Time (US & Canada)')

        self.assertEqual(result.fold, 0)
        self.assertEqual(result.utcoffset(), timedelta(hours=-4))

    def test_reinterpret_after_convert_in_same_zone_is_unchanged(self):
        converted = self.context.convert_to_zone(Y2K, 'Hawaii')

        self.assertEqual(self.context.reinterpret_in_zone(converted, 'Hawaii'), converted)
        self.assertEqual(self.context.reinterpret_in_zone(Y2K, 'UTC'), Y2K)

    def test_current_zone_conversions_use_default(self):
        self.context.set_default_zone('Hawaii')

        self.assertEqual(
            self.context.convert_to_current_zone(Y2K),
            self.context.convert_to_zone(Y2K, 'Hawaii')
        )
        self.assertEqual(
            self.context.reinterpret_in_current_zone(Y2K).isoformat(),
            '2000-01-01T00:00:00-10:00'
        )

    def test_current_zone_conversions_fail_when_unset(self):
        self.context.set_default_zone('Hawaii')
        self.context.reset_default_zone()

        with self.assertRaises(NoDefaultZoneError):
            self.context.convert_to_current_zone(Y2K)
        with self.assertRaises(NoDefaultZoneError):
            self.context.reinterpret_in_current_zone(Y2K)

    def test_contexts_do_not_share_defaults(self):
        other = ZoneContext()
        self.context.set_default_zone('Hawaii')

        self.assertIsNone(other.get_default_zone())


class ModuleLevelZoneTests(unittest.TestCase):
    def setUp(self):
        zoned_time.reset_default_zone()

    def tearDown(self):
        zoned_time.reset_default_zone()

    def test_module_functions_share_default_context(self):
        zone = zoned_time.set_default_zone('Hawaii')

        self.assertIs(zoned_time.default_context.get_default_zone(), zone)
        self.assertIs(zoned_time.get_default_zone(), zone)
        self.assertEqual(
            zoned_time.convert_to_current_zone(Y2K),
            zoned_time.convert_to_zone(Y2K, 'Hawaii')
        )
        self.assertEqual(
            zoned_time.reinterpret_in_current_zone(Y2K),
            zoned_time.reinterpret_in_zone(Y2K, zone)
        )

    def test_module_functions_without_default(self):
        self.assertIsNone(zoned_time.get_default_zone())

        with self.assertRaises(NoDefaultZoneError):
            zoned_time.convert_to_current_zone(Y2K)

    def test_module_resolve_unknown_zone(self):
        with self.assertRaises(UnknownZoneError):
            zoned_time.resolve('Narnia/Nowhere')


if __name__ == '__main__':
    unittest.main()
