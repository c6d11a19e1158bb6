import unittest

from markovgen.models.markov import MarkovModel


CORPUS = (
    "the cat sat on the mat and the hat sat on the cat. "
    "abc abc abd the end of the abc text."
)


class TestMarkovModel(unittest.TestCase):

    def test_rejects_non_positive_window_length(self):
        with self.assertRaises(ValueError):
            MarkovModel(0)

    def test_window_length_is_read_only(self):
        model = MarkovModel(2, seed=1)
        with self.assertRaises(AttributeError):
            model.window_length = 3

    def test_repeating_corpus(self):
        model = MarkovModel(2, seed=5)
        model.train("abcabcabcabc")
        probs = model.window_map["ab"]
        self.assertEqual(len(probs), 1)
        self.assertEqual(probs.find('c').count, 4)
        self.assertEqual(probs.find('c').p, 1.0)
        self.assertEqual(model.generate("ab", 4), "abcabc")
        self.assertEqual(set(model.window_map), {"ab", "bc", "ca"})

    def test_probabilities_are_normalized(self):
        model = MarkovModel(3, seed=0)
        model.train(CORPUS)
        self.assertTrue(model.is_trained)
        for window, probs in model.window_map.items():
            self.assertEqual(len(window), 3)
            self.assertAlmostEqual(sum(entry.p for entry in probs), 1.0, delta=1e-9)
            cps = [entry.cp for entry in probs]
            self.assertEqual(cps, sorted(cps))
            self.assertAlmostEqual(cps[-1], 1.0, delta=1e-9)

    def test_same_seed_same_output(self):
        outputs = []
        for _ in range(2):
            model = MarkovModel(2, seed=42)
            model.train(CORPUS)
            outputs.append(model.generate("abc", 10))
        self.assertEqual(outputs[0], outputs[1])
        self.assertTrue(outputs[0].startswith("abc"))

    def test_unseeded_models_draw_fresh_entropy(self):
        models = [MarkovModel(1) for _ in range(5)]
        seeds = {model._generator.initial_seed() for model in models}
        self.assertGreater(len(seeds), 1)

        outputs = set()
        for model in models:
            model.train("abacadaeafagahaiajak")
            outputs.add(model.generate("a", 30))
        self.assertGreater(len(outputs), 1)

    def test_short_seed_is_returned_unchanged(self):
        model = MarkovModel(3, seed=0)
        model.train(CORPUS)
        for n in (0, 1, 50):
            self.assertEqual(model.generate("th", n), "th")

    def test_unseen_window_is_returned_unchanged(self):
        model = MarkovModel(2, seed=0)
        model.train("abc")
        self.assertEqual(list(model.window_map), ["ab"])
        self.assertEqual(model.generate("xy", 5), "xy")

    def test_uses_last_window_of_seed(self):
        model = MarkovModel(2, seed=0)
        model.train("abcabcabcabc")
        self.assertEqual(model.generate("zzzab", 3), "zzzabcab")

    def test_generation_stops_at_dead_end(self):
        model = MarkovModel(2, seed=0)
        model.train("abcd")
        # "cd" has no successor
        self.assertEqual(model.generate("ab", 10), "abcd")

    def test_non_positive_target_length(self):
        model = MarkovModel(1, seed=0)
        model.train("aaaa")
        self.assertEqual(model.generate("a", 0), "a")
        self.assertEqual(model.generate("a", -3), "a")

    def test_repeated_training_adds_counts(self):
        model = MarkovModel(1, seed=0)
        model.train("aab")
        model.train("aac")
        probs = model.window_map["a"]
        self.assertEqual([entry.char for entry in probs], ['a', 'b', 'c'])
        self.assertEqual(probs.find('a').count, 2)
        self.assertEqual(probs.find('b').count, 1)
        self.assertEqual(probs.find('c').count, 1)
        self.assertAlmostEqual(probs.find('b').p, 0.25)
        self.assertAlmostEqual(probs[len(probs) - 1].cp, 1.0, delta=1e-9)

    def test_each_training_call_starts_a_fresh_window(self):
        model = MarkovModel(1, seed=0)
        model.train("ab")
        model.train("cd")
        self.assertNotIn("b", model)
        self.assertEqual(len(model), 2)

    def test_corpus_shorter_than_window_leaves_empty_model(self):
        model = MarkovModel(5, seed=0)
        with self.assertLogs('markovgen.models.markov', level='WARNING'):
            transitions = model.train("abc")
        self.assertEqual(transitions, 0)
        self.assertFalse(model.is_trained)
        self.assertEqual(model.generate("hello", 10), "hello")
        self.assertEqual(str(model), "")

    def test_corpus_of_exactly_one_window(self):
        model = MarkovModel(3, seed=0)
        self.assertEqual(model.train("abc"), 0)
        self.assertEqual(len(model), 0)

    def test_train_accepts_chunked_stream(self):
        lines = ["the cat ", "sat on\n", "", "the mat\n"]
        chunked = MarkovModel(2, seed=0)
        chunked.train(iter(lines))
        whole = MarkovModel(2, seed=0)
        whole.train(''.join(lines))
        self.assertEqual(str(chunked), str(whole))

    def test_dump_lists_every_window_once(self):
        model = MarkovModel(2, seed=0)
        model.train("abcabd")
        lines = str(model).splitlines()
        self.assertEqual([line.split(" : ")[0] for line in lines], ["ab", "bc", "ca"])
        self.assertEqual(lines[0], "ab : (c 1 0.5 0.5)(d 1 0.5 1.0)")

    def test_stats(self):
        model = MarkovModel(2, seed=0)
        empty = model.stats()
        self.assertEqual(empty["windows"], 0)
        self.assertEqual(empty["avg_transitions_per_window"], 0.0)
        self.assertEqual(set(empty), {"windows", "total_transitions", "avg_transitions_per_window", "distinct_chars"})
        model.train("abcabcabcabc")
        stats = model.stats()
        self.assertEqual(stats["windows"], 3)
        self.assertEqual(stats["total_transitions"], 10)
        self.assertEqual(stats["distinct_chars"], 3)
        self.assertAlmostEqual(stats["avg_transitions_per_window"], 10 / 3)


if __name__ == '__main__':
    unittest.main()
