from __future__ import annotations

import unittest
from pathlib import PurePosixPath

from datadirs.directories import group_by_medium, parse_data_dirs, split_data_dirs
from datadirs.errors import InvalidDataDirs, UnknownModifier, UnsupportedScheme
from datadirs.storage_types import StorageMedium, StorageModifier


class DataDirListTests(unittest.TestCase):
    def test_split_trims_and_drops_empty_entries(self) -> None:
        self.assertEqual(split_data_dirs(" [SSD]/a, ,/b ,"), ["[SSD]/a", "/b"])
        self.assertEqual(split_data_dirs(""), [])

    def test_parse_keeps_configuration_order(self) -> None:
        locations = parse_data_dirs("[SSD]/a, /b,[ARCHIVE+SHARED]file:///c")

        self.assertEqual([loc.path for loc in locations], [PurePosixPath(p) for p in ("/a", "/b", "/c")])
        self.assertEqual(
            [loc.medium for loc in locations],
            [StorageMedium.SSD, StorageMedium.DISK, StorageMedium.ARCHIVE],
        )
        self.assertIs(locations[2].modifier, StorageModifier.SHARED)

    def test_parse_accepts_token_sequence(self) -> None:
        locations = parse_data_dirs(["[DISK]/a", "  ", " [ssd]/b "])

        self.assertEqual(len(locations), 2)
        self.assertIs(locations[1].medium, StorageMedium.SSD)

    def test_first_bad_entry_aborts_with_index(self) -> None:
        with self.assertRaises(InvalidDataDirs) as ctx:
            parse_data_dirs("/ok,[DISK+BOGUS]/x,hdfs://nn/y")

        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.token, "[DISK+BOGUS]/x")
        self.assertIsInstance(ctx.exception.__cause__, UnknownModifier)

    def test_unsupported_scheme_is_reported(self) -> None:
        with self.assertRaises(InvalidDataDirs) as ctx:
            parse_data_dirs("hdfs://nn/y")
        self.assertIsInstance(ctx.exception.cause, UnsupportedScheme)

    def test_scheme_less_entries_are_warned_about(self) -> None:
        with self.assertLogs("datadirs.directories", level="WARNING") as logs:
            parse_data_dirs("[DISK]file:///a,[SSD]/b")

        self.assertEqual(len(logs.records), 1)
        self.assertIn("[SSD]/b", logs.output[0])

    def test_group_by_medium(self) -> None:
        locations = parse_data_dirs("[SSD]/s1,/d1,[ssd]/s2")

        grouped = group_by_medium(locations)

        self.assertEqual(list(grouped), [StorageMedium.SSD, StorageMedium.DISK])
        self.assertEqual([str(loc.path) for loc in grouped[StorageMedium.SSD]], ["/s1", "/s2"])


if __name__ == "__main__":
    unittest.main()
