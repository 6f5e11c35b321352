import unittest
import inspect
import os
import shutil
import tempfile
import numpy as np
from numpy.testing import assert_almost_equal
from Utilities import files

TEST_DIR = os.path.dirname(os.path.abspath(inspect.getsourcefile(lambda _: None)))


class TestFileLoading(unittest.TestCase):

    def setUp(self):
        self.testfile = os.path.join(TEST_DIR, 'test_data', 'points.csv')

    def testLoadFile(self):
        """Test flLoadFile skips comments and loads data correctly"""
        data = files.flLoadFile(self.testfile)
        self.assertEqual(data.shape, (10, 2))
        assert_almost_equal(data[0], [25.0, -80.0])
        assert_almost_equal(data[-1], [23.0, -82.0])


class TestLogFileName(unittest.TestCase):

    def testPlainName(self):
        """Test the log file name is unchanged without a datestamp"""
        self.assertEqual(files.flLogFileName('log/vortex.log'),
                         'log/vortex.log')

    def testDatestamp(self):
        """Test a timestamp is inserted before the extension"""
        name = files.flLogFileName('log/vortex.log', datestamp=True)
        self.assertTrue(name.startswith('log/vortex.'))
        self.assertTrue(name.endswith('.log'))
        self.assertEqual(len(name), len('log/vortex..log') + 12)


class TestFileSaving(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def testSaveFile(self):
        """Test flSaveFile creates the directory and writes the data"""
        data = np.array([[25., -80., 1.5, -2.5, 95000.],
                         [26., -80., -20., -10., 99000.]])
        filename = os.path.join(self.tmpdir, 'sub', 'uvp.csv')
        files.flSaveFile(filename, data, header='lat,lon,u,v,p', fmt='%.6f')
        self.assertTrue(os.path.isfile(filename))
        with open(filename) as fh:
            self.assertEqual(fh.readline().strip(), '%lat,lon,u,v,p')
        assert_almost_equal(files.flLoadFile(filename), data)

    def testModDate(self):
        """Test flModDate returns a formatted date"""
        filename = os.path.join(self.tmpdir, 'dated.txt')
        with open(filename, 'w') as fh:
            fh.write('x')
        moddate = files.flModDate(filename, dateformat='%Y')
        self.assertEqual(len(moddate), 4)

    def testModDateMissing(self):
        """Test flModDate raises IOError for a missing file"""
        self.assertRaises(IOError, files.flModDate,
                          os.path.join(self.tmpdir, 'missing.txt'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
