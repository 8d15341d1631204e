import unittest
from math import isnan

from keyed_sorts.generate_statistics import COLUMNS, generate_statistics, get_avg_operation_cnt, get_operation_cnts, log2_factorial, to_displayable_int
from keyed_sorts.sorting_algorithms.sorting_algorithms import get_sorting_algorithm


class TestOperationCount(unittest.TestCase):
    def test_insertion_sort_bounds(self):
        # best case is already-sorted input, worst case is reversed input
        best, worst, avg = get_avg_operation_cnt(get_sorting_algorithm("insertion sort"), 5)
        self.assertEqual(best, 4)
        self.assertLessEqual(worst, 10)
        self.assertTrue(best <= avg <= worst)

    def test_every_permutation_counted(self):
        data = get_operation_cnts(get_sorting_algorithm("merge sort"), 4)
        self.assertEqual(len(data), 24)

    def test_trivial_sizes(self):
        for name in ("heap sort", "insertion sort", "merge sort"):
            with self.subTest(name):
                self.assertEqual(get_avg_operation_cnt(get_sorting_algorithm(name), 0), (0, 0, 0.0))
                self.assertEqual(get_avg_operation_cnt(get_sorting_algorithm(name), 1), (0, 0, 0.0))

    def test_sampled(self):
        algorithm = get_sorting_algorithm("heap sort")._replace(max_N=2)
        data = get_operation_cnts(algorithm, 12)
        self.assertGreater(len(data), 0)
        self.assertTrue((data >= log2_factorial(12) / 2).all())


class TestHelpers(unittest.TestCase):
    def test_to_displayable_int(self):
        self.assertEqual(to_displayable_int(720), "720")
        self.assertEqual(to_displayable_int(10**12), "1.00e+12")

    def test_log2_factorial(self):
        self.assertAlmostEqual(log2_factorial(4), 4.584962500721156)
        self.assertEqual(log2_factorial(1), 0)


class TestGenerateStatistics(unittest.TestCase):
    def test_table(self):
        df = generate_statistics([1, 3, 5], processes=2, progress=False)
        self.assertEqual(list(df.columns), COLUMNS)
        self.assertEqual(len(df), 9)
        self.assertEqual(list(df["name"]), ["heap sort"] * 3 + ["insertion sort"] * 3 + ["merge sort"] * 3)
        self.assertEqual(list(df["N"]), [1, 3, 5] * 3)
        self.assertTrue(isnan(df["ratio"][0]))
        self.assertTrue(((df["best"] <= df["avg"]) & (df["avg"] <= df["worst"])).all())


if __name__ == "__main__":
    unittest.main()
