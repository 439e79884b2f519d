"""
Unit tests for CRC-32 lookup table construction.
"""

import unittest
import time
import threading
from unittest import mock
from tablecrc.crc import table as crc_table
from tablecrc.crc.table import REFLECTED_POLYNOMIAL, POLYNOMIAL, build_table, get_table, modulo2


def bitwise_entry(byte: int, reflected_polynomial: int) -> int:
    """Shift-and-XOR reference: eight single-bit steps for one byte"""
    crc = byte
    for _ in range(8):
        if crc & 1:
            crc = (crc >> 1) ^ reflected_polynomial
        else:
            crc >>= 1
    return crc


class TestTable(unittest.TestCase):
    """Test cases for modulo2, build_table and get_table"""
    
    def test_reflected_polynomial(self):
        """Test the derived polynomial constant"""
        self.assertEqual(POLYNOMIAL, 0x04C11DB7)
        self.assertEqual(REFLECTED_POLYNOMIAL, 0xEDB88320)
    
    def test_size_and_range(self):
        """Test the table holds 256 unsigned 32-bit entries"""
        table = build_table()
        self.assertEqual(len(table), 256)
        for entry in table:
            self.assertTrue(0 <= entry <= 0xFFFFFFFF)
    
    def test_known_entries(self):
        """Test well-known entries of the standard table"""
        table = build_table()
        self.assertEqual(table[0], 0)
        self.assertEqual(table[1], 0x77073096)
        self.assertEqual(table[128], 0xEDB88320)
        self.assertEqual(table[255], 0x2D02EF8D)
    
    def test_zero_entry_any_polynomial(self):
        """Test entry 0 is zero whatever the polynomial"""
        for poly in (0xEDB88320, 0x82F63B78, 0x1, 0xFFFFFFFF):
            self.assertEqual(modulo2(0, poly), 0)
            self.assertEqual(build_table(poly)[0], 0)
    
    def test_matches_bitwise_division(self):
        """Test every entry equals eight shift-and-XOR steps"""
        for poly in (REFLECTED_POLYNOMIAL, 0x82F63B78):
            table = build_table(poly)
            for i in range(256):
                self.assertEqual(table[i], bitwise_entry(i, poly))
    
    def test_deterministic(self):
        """Test building twice yields identical tables"""
        self.assertEqual(build_table(), build_table())
    
    def test_read_only(self):
        """Test the table cannot be modified in place"""
        table = build_table()
        with self.assertRaises(TypeError):
            table[0] = 1
    
    def test_shared_table(self):
        """Test get_table returns one instance equal to a fresh build"""
        self.assertIs(get_table(), get_table())
        self.assertEqual(get_table(), build_table())
    


class TestSharedTableInit(unittest.TestCase):
    """Test cases for the once-only build behind get_table"""
    
    def setUp(self):
        """Start every test with no shared table built"""
        self.saved_table = crc_table._table
        crc_table._table = None
    
    def tearDown(self):
        """Restore the shared table"""
        crc_table._table = self.saved_table
    
    def test_first_access_builds(self):
        """Test the first call builds the table and later calls reuse it"""
        with mock.patch.object(crc_table, 'build_table', wraps=build_table) as builder:
            first = get_table()
            second = get_table()
        self.assertEqual(builder.call_count, 1)
        self.assertIs(first, second)
        self.assertEqual(first, build_table())
    
    def test_concurrent_first_access(self):
        """Test threads racing on first access build the table exactly once"""
        num_threads = 8
        barrier = threading.Barrier(num_threads)
        results = []
        
        def slow_build():
            time.sleep(0.05)
            return build_table()
        
        def worker():
            barrier.wait()
            results.append(get_table())
        
        with mock.patch.object(crc_table, 'build_table', side_effect=slow_build) as builder:
            threads = [threading.Thread(target=worker) for _ in range(num_threads)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        
        self.assertEqual(builder.call_count, 1)
        self.assertEqual(len(results), num_threads)
        for table in results:
            self.assertIs(table, results[0])
        self.assertEqual(results[0], build_table())


if __name__ == '__main__':
    unittest.main()
