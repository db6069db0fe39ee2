import random
import unittest

from wgraph import ConcreteVerticesGraph, ConcreteEdgesGraph, InvalidWeightError

LABELS = ["A", "B", "C", "D", "E", "F"]

class EquivalenceTest(unittest.TestCase):
    """Both representations must agree after every operation."""

    def assert_same_state(self, first, second):
        self.assertEqual(first.vertices(), second.vertices())
        self.assertEqual(first.empty(), second.empty())
        for label in LABELS:
            self.assertEqual(dict(first.sources(label)), dict(second.sources(label)))
            self.assertEqual(dict(first.targets(label)), dict(second.targets(label)))
        first.check_rep()
        second.check_rep()

    def run_sequence(self, seed: int, steps: int = 200):
        rng = random.Random(seed)
        first = ConcreteVerticesGraph(check_rep=True)
        second = ConcreteEdgesGraph(check_rep=True)

        for _ in range(steps):
            op = rng.choice(["add", "set", "set", "set", "remove"])
            if op == "add":
                label = rng.choice(LABELS)
                self.assertEqual(first.add(label), second.add(label))
            elif op == "set":
                source, target = rng.choice(LABELS), rng.choice(LABELS)
                weight = rng.choice([0, 0, 1, 2, 5, 9, -1])
                if weight < 0:
                    for g in (first, second):
                        with self.assertRaises(InvalidWeightError):
                            g.set(source, target, weight)
                else:
                    self.assertEqual(first.set(source, target, weight), second.set(source, target, weight))
            else:
                label = rng.choice(LABELS)
                self.assertEqual(first.remove(label), second.remove(label))
            self.assert_same_state(first, second)

    def test_random_sequences(self):
        for seed in range(20):
            with self.subTest(seed=seed):
                self.run_sequence(seed)

    def test_fixed_sequence(self):
        first, second = ConcreteVerticesGraph(), ConcreteEdgesGraph()
        for g in (first, second):
            g.add("A")
            g.set("A", "B", 5)
            g.set("C", "B", 3)
            g.set("B", "A", 1)
            g.set("C", "B", 0)
            g.remove("A")
            g.set("D", "D", 4)
        self.assert_same_state(first, second)
        self.assertEqual(first.vertices(), {"B", "C", "D"})
        self.assertEqual(dict(first.sources("B")), {})

if __name__ == "__main__":
    unittest.main()
