import unittest

from PasswordStructures import MembershipSet, SubstringDictionary


class TestMembershipSet(unittest.TestCase):
    def test_contains_added_password(self):
        known = MembershipSet(["password", "qwerty"])
        self.assertTrue(known.contains("qwerty"))
        self.assertFalse(known.contains("Qwerty"))
        self.assertIn("password", known)

    def test_empty_string_never_stored(self):
        known = MembershipSet()
        known.add("")
        self.assertEqual(len(known), 0)
        self.assertFalse(known.contains(""))

    def test_duplicate_add_is_harmless(self):
        known = MembershipSet()
        known.add("admin")
        known.add("admin")
        self.assertEqual(len(known), 1)
        self.assertEqual(list(known), ["admin"])


class TestSubstringDictionary(unittest.TestCase):
    def setUp(self):
        self.dictionary = SubstringDictionary(["password", "admin", "pass", "hello"])

    def test_finds_embedded_word(self):
        self.assertIn("password", self.dictionary.find_words_in_password("mypassword1"))

    def test_no_match(self):
        self.assertEqual(self.dictionary.find_words_in_password("xyz"), [])
        self.assertEqual(self.dictionary.find_words_in_password(""), [])

    def test_matches_ordered_by_offset_then_length(self):
        found = self.dictionary.find_words_in_password("hellopassword")
        self.assertEqual(found, ["hello", "pass", "password"])

    def test_repeated_words_reported_each_time(self):
        found = self.dictionary.find_words_in_password("adminXadmin")
        self.assertEqual(found, ["admin", "admin"])

    def test_overlapping_matches(self):
        dictionary = SubstringDictionary(["abc", "bcd", "abcde"])
        self.assertEqual(dictionary.find_words_in_password("xabcdef"), ["abc", "abcde", "bcd"])

    def test_short_words_are_not_reported(self):
        dictionary = SubstringDictionary(["ab", "abc"])
        self.assertEqual(dictionary.find_words_in_password("ab"), [])
        self.assertEqual(dictionary.find_words_in_password("zabc"), ["abc"])

    def test_matching_is_case_sensitive(self):
        self.assertEqual(self.dictionary.find_words_in_password("PASSWORD"), [])

    def test_non_ascii_skipped_on_insert(self):
        dictionary = SubstringDictionary()
        dictionary.insert("cafés")
        self.assertEqual(len(dictionary), 1)
        self.assertEqual(dictionary.find_words_in_password("xcafsx"), ["cafs"])

    def test_non_ascii_breaks_match(self):
        dictionary = SubstringDictionary(["cafs"])
        self.assertEqual(dictionary.find_words_in_password("cafés"), [])

    def test_empty_and_non_ascii_only_words_ignored(self):
        dictionary = SubstringDictionary()
        dictionary.insert("")
        dictionary.insert("éèê")
        self.assertEqual(len(dictionary), 0)
        self.assertFalse(dictionary.root.is_end_of_word)

    def test_terminal_flag_only_where_word_ends(self):
        node = self.dictionary.root
        for ch in "pass":
            node = node.children[ch]
        self.assertTrue(node.is_end_of_word)
        self.assertFalse(node.children["w"].is_end_of_word)
        self.assertEqual(len(self.dictionary), 4)


if __name__ == "__main__":
    unittest.main()
