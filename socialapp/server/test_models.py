import dataclasses
import unittest
from socialapp.server.models import Person, Group, Post

class TestPost(unittest.TestCase):
    def test_post_is_immutable(self):
        post = Post(serial=3, author_code='alice', text='hi', timestamp=10)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            post.text = 'changed'

    def test_post_id_is_serial_string(self):
        self.assertEqual(Post(serial=42, author_code='a', text='', timestamp=0).post_id, '42')

class TestPerson(unittest.TestCase):
    def test_info_is_name_and_surname(self):
        self.assertEqual(Person('alice', 'Alice', 'Smith').info(), 'Alice Smith')

    def test_add_friend_counts_once(self):
        p = Person('alice', 'Alice', 'Smith')
        self.assertTrue(p.add_friend('bob'))
        self.assertFalse(p.add_friend('bob'))
        self.assertEqual(p.friend_count, 1)
        self.assertTrue(p.is_friend('bob'))
        self.assertFalse(p.is_friend('carol'))

    def test_posts_newest_first(self):
        p = Person('alice', 'Alice', 'Smith')
        for serial in (1, 5, 3):
            p.add_post(Post(serial=serial, author_code='alice', text=str(serial), timestamp=0))
        self.assertEqual([x.serial for x in p.posts_newest_first()], [5, 3, 1])
        self.assertEqual(p.get_post(5).text, '5')
        self.assertIsNone(p.get_post(2))

    def test_instances_do_not_share_collections(self):
        a, b = Person('a', 'A', 'A'), Person('b', 'B', 'B')
        a.add_friend('x')
        self.assertEqual(b.friend_count, 0)

class TestGroup(unittest.TestCase):
    def test_add_member_reports_repeat(self):
        g = Group('G')
        self.assertTrue(g.add_member('alice'))
        self.assertFalse(g.add_member('alice'))
        self.assertEqual(g.member_count, 1)
        self.assertTrue(g.is_member('alice'))

if __name__ == '__main__':
    unittest.main()
