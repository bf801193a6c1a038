#!/usr/bin/env python3
"""Test suite for product file naming and reading"""

import unittest

import pytest

from pygnssim.io.product_files import (
    clock_file_names,
    directory_for_file_sort,
    read_clock_files,
    read_file_contents,
    read_sp3_files,
    sp3_file_names,
)


class TestDirectoryForFileSort(unittest.TestCase):

    def test_igs(self):
        self.assertEqual(directory_for_file_sort('IGS'), 'IGS/igs/')
        self.assertEqual(directory_for_file_sort('IGR'), 'IGS/igr/')
        self.assertEqual(directory_for_file_sort('IGU'), 'IGS/igu/')

    def test_madoca(self):
        self.assertEqual(directory_for_file_sort('madoca'), 'JAXA/madoca/')

    def test_agency(self):
        self.assertEqual(directory_for_file_sort('JAXA_Final'), 'JAXA/final/')
        self.assertEqual(directory_for_file_sort('CODE_Rapid'), 'CODE/rapid/')
        self.assertEqual(directory_for_file_sort('ESA_Ultra'), 'ESA/ultra_rapid/')

    def test_unknown(self):
        for sort in ('IGX', 'CODE_Weekly', 'CODE', ''):
            with self.assertRaises(ValueError):
                directory_for_file_sort(sort)


class TestFileNames(unittest.TestCase):

    def test_daily_week_roll_over(self):
        names = sp3_file_names('IGS', 'igs21615.sp3', 'igs21621.sp3')
        self.assertEqual(names, ['igs21615.sp3', 'igs21616.sp3', 'igs21620.sp3', 'igs21621.sp3'])

    def test_single_file(self):
        self.assertEqual(sp3_file_names('IGS', 'igs21610.sp3', 'igs21610.sp3'), ['igs21610.sp3'])

    def test_ultra_rapid(self):
        names = sp3_file_names('IGU', 'igu21616_12.sp3', 'igu21620_06.sp3')
        self.assertEqual(names, ['igu21616_12.sp3', 'igu21616_18.sp3',
                                 'igu21620_00.sp3', 'igu21620_06.sp3'])

    def test_ultra_by_agency_name(self):
        names = sp3_file_names('JAXA_Ultra', 'mgx21610_18.sp3', 'mgx21611_00.sp3')
        self.assertEqual(names, ['mgx21610_18.sp3', 'mgx21611_00.sp3'])

    def test_cod_year_roll_over(self):
        names = sp3_file_names('CODE_Final', 'COD0MGXFIN_20203650000_01D_05M_ORB.SP3',
                               'COD0MGXFIN_20210010000_01D_05M_ORB.SP3')
        self.assertEqual(names, ['COD0MGXFIN_20203650000_01D_05M_ORB.SP3',
                                 'COD0MGXFIN_20203660000_01D_05M_ORB.SP3',
                                 'COD0MGXFIN_20210010000_01D_05M_ORB.SP3'])

    def test_clock_names(self):
        self.assertEqual(clock_file_names('IGS', 'igs21616.clk_30s', 'igs21620.clk_30s'),
                         ['igs21616.clk_30s', 'igs21620.clk_30s'])
        self.assertEqual(clock_file_names('JAXA_Ultra', 'mgx21610_18.clk', 'mgx21611_00.clk'),
                         ['mgx21610_18.clk', 'mgx21611_00.clk'])

    def test_unreachable_last(self):
        with self.assertRaises(ValueError):
            sp3_file_names('IGS', 'igs21615.sp3', 'igr21620.sp3')

    def test_name_without_week(self):
        with self.assertRaises(ValueError):
            sp3_file_names('IGS', 'igs.sp3', 'igs.sp3')


def test_read_file_contents_drops_eof(tmp_path):
    path = tmp_path / 'a.sp3'
    path.write_text("line 1\nline 2\nEOF\n")
    assert read_file_contents(str(path)) == ['line 1', 'line 2']


def test_read_file_contents_without_eof(tmp_path):
    path = tmp_path / 'a.sp3'
    path.write_text("line 1\nline 2\n")
    assert read_file_contents(str(path)) == ['line 1', 'line 2']


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_contents(str(tmp_path / 'missing.sp3'))


def test_read_sp3_files(tmp_path):
    directory = tmp_path / 'IGS' / 'igu'
    directory.mkdir(parents=True)
    for name in ('igu21610_00.sp3', 'igu21610_06.sp3'):
        (directory / name).write_text(f"{name}\nEOF\n")

    pages, is_ultra_rapid = read_sp3_files(str(tmp_path), 'IGU', 'igu21610_00.sp3',
                                           'igu21610_06.sp3')
    assert pages == [['igu21610_00.sp3'], ['igu21610_06.sp3']]
    assert is_ultra_rapid


def test_read_clock_files(tmp_path):
    directory = tmp_path / 'IGS' / 'igs' / 'clk_30s'
    directory.mkdir(parents=True)
    (directory / 'igs21610.clk_30s').write_text("AS G01\n")

    pages, is_ultra_rapid = read_clock_files(str(tmp_path), '.clk_30s', 'IGS',
                                             'igs21610.clk_30s', 'igs21610.clk_30s')
    assert pages == [['AS G01']]
    assert not is_ultra_rapid


def test_read_clock_files_bad_extension(tmp_path):
    with pytest.raises(ValueError):
        read_clock_files(str(tmp_path), 'clk', 'IGS', 'igs21610.clk', 'igs21610.clk')


if __name__ == '__main__':
    unittest.main()
