import heapq
import itertools
import time
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .models import Person, Post
from .repo import PersonsRepo, GroupsRepo
from .errors import InvalidPagination, PostNotFound, SelfFriendship
from ..config.settings import SocialSettings, settings as default_settings
from ..utils.logger import setup_logger

logger = setup_logger('socialapp.graph')


def _top(counts: Dict[str, int]) -> Optional[str]:
    """Key with the highest count; ties go to the lexicographically smallest key."""
    if not counts:
        return None
    return min(counts.items(), key=lambda kv: (-kv[1], kv[0]))[0]


def _page(items: Iterable, page_number: int, page_size: int) -> list:
    """Slice a newest-first iterable to a 1-indexed page."""
    if page_number < 1 or page_size <= 0:
        raise InvalidPagination(
            f"Invalid page {page_number} of size {page_size}: "
            "page number must be >= 1 and page size > 0"
        )
    start = (page_number - 1) * page_size
    return list(itertools.islice(items, start, start + page_size))


class SocialGraph:
    """Owner of every person, group and post in the social network.

    All requests go through this class. It validates identifiers before
    touching state, so a rejected operation never leaves a half-applied
    change behind, and it only hands out codes, names and immutable posts.

    The post serial counter lives on the instance: two graphs never share
    serials.

    Attributes:
        persons (PersonsRepo): Registry of people
        groups (GroupsRepo): Registry of groups
        next_serial (int): Serial the next post will receive
    """

    def __init__(self, persons: Optional[PersonsRepo] = None, groups: Optional[GroupsRepo] = None,
                 config: Optional[SocialSettings] = None):
        config = config or default_settings
        self.persons = persons if persons is not None else PersonsRepo()
        self.groups = groups if groups is not None else GroupsRepo()
        self.next_serial = config.first_post_serial
        logger.debug(f"Social graph initialized, first post serial {self.next_serial}")

    # People

    def register_person(self, code: str, name: str, surname: str):
        """Register a new person with no friends and no posts.

        Raises:
            DuplicateIdentifier: If the code is already registered
        """
        self.persons.add(Person(code=code, name=name, surname=surname))

    def get_person_info(self, code: str) -> str:
        """Return "name surname" of the person with the given code."""
        return self.persons.require(code).info()

    def search_persons(self, query: str) -> List[str]:
        return [p.code for p in self.persons.find_by_name(query)]

    # Friendships

    def add_friendship(self, code_a: str, code_b: str) -> bool:
        """Make two people friends of each other.

        Args:
            code_a (str): First person code
            code_b (str): Second person code

        Returns:
            bool: True if the friendship is new, False if they were already friends

        Raises:
            UnknownIdentifier: If either code is not registered
            SelfFriendship: If both codes are the same person
        """
        person_a = self.persons.require(code_a)
        person_b = self.persons.require(code_b)
        if code_a == code_b:
            logger.warning(f"Rejected self friendship for {code_a}")
            raise SelfFriendship(f"Person {code_a} cannot befriend themselves")

        added_a = person_a.add_friend(code_b)
        added_b = person_b.add_friend(code_a)
        if added_a or added_b:
            logger.info(f"Friendship added: {code_a} <-> {code_b}")
            return True
        logger.debug(f"{code_a} and {code_b} are already friends")
        return False

    def are_friends(self, code_a: str, code_b: str) -> bool:
        person_a = self.persons.require(code_a)
        self.persons.require(code_b)
        return person_a.is_friend(code_b)

    def list_friends(self, code: str) -> List[str]:
        return sorted(self.persons.require(code).friend_codes)

    def friend_count(self, code: str) -> int:
        return self.persons.require(code).friend_count

    def friends_of_friends(self, code: str) -> List[str]:
        """Codes reachable in exactly two friendship hops.

        One entry per path, so a person reached through several friends
        appears several times. The starting person is left out even though
        every friend leads back to them. Friends are walked in code order.
        """
        person = self.persons.require(code)
        result = []
        for friend_code in sorted(person.friend_codes):
            friend = self.persons.get(friend_code)
            result.extend(c for c in sorted(friend.friend_codes) if c != code)
        return result

    def friends_of_friends_distinct(self, code: str) -> List[str]:
        return sorted(set(self.friends_of_friends(code)))

    # Groups

    def create_group(self, name: str) -> bool:
        """Create a group; an existing name is left untouched.

        Returns:
            bool: True if created, False if the group already existed
        """
        return self.groups.create_group(name)

    def add_person_to_group(self, code: str, group_name: str) -> bool:
        """Subscribe a person to a group.

        Returns:
            bool: True for a new membership, False if already a member

        Raises:
            UnknownIdentifier: If the person or the group does not exist
        """
        self.persons.require(code)
        return self.groups.add_member(group_name, code)

    def list_group_members(self, group_name: str) -> List[str]:
        return sorted(self.groups.require(group_name).member_codes)

    def list_groups(self) -> List[str]:
        return self.groups.names()

    def list_person_groups(self, code: str) -> List[str]:
        self.persons.require(code)
        return [g.name for g in self.groups.get_person_groups(code)]

    # Rankings

    def person_with_most_friends(self) -> Optional[str]:
        return _top({p.code: p.friend_count for p in self.persons.all()})

    def person_with_most_friends_of_friends(self) -> Optional[str]:
        # Recomputes the second hop for every person: O(P * F^2).
        return _top({
            p.code: len(self.friends_of_friends_distinct(p.code))
            for p in self.persons.all()
        })

    def largest_group(self) -> Optional[str]:
        return _top({g.name: g.member_count for g in self.groups.all()})

    def person_in_most_groups(self) -> Optional[str]:
        memberships = Counter(
            code for g in self.groups.all() for code in g.member_codes
        )
        return _top(dict(memberships))

    # Posts

    def create_post(self, author_code: str, text: str, timestamp: Optional[int] = None) -> str:
        """Publish a post for the given author.

        Args:
            author_code (str): Account code of the author
            text (str): Content of the post
            timestamp (int, optional): Creation time in ms. Defaults to now

        Returns:
            str: Id of the new post

        Raises:
            UnknownIdentifier: If the author is not registered
        """
        author = self.persons.require(author_code)
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        post = Post(serial=self.next_serial, author_code=author_code, text=text, timestamp=timestamp)
        author.add_post(post)
        self.next_serial += 1
        logger.info(f"New post {post.post_id} by {author_code}")
        return post.post_id

    def get_post(self, author_code: str, post_id: str) -> Post:
        """Look up a post by author and id.

        Raises:
            UnknownIdentifier: If the author is not registered
            PostNotFound: If the id is malformed or belongs to someone else
        """
        author = self.persons.require(author_code)
        try:
            serial = int(post_id)
        except (TypeError, ValueError):
            serial = None
        post = author.get_post(serial) if serial is not None else None
        # only the id handed out by create_post resolves, not "01" or " 1 "
        if post is None or post.post_id != post_id:
            logger.warning(f"Post {post_id} not found for {author_code}")
            raise PostNotFound(f"Post {post_id} does not exist for {author_code}")
        return post

    def get_post_content(self, author_code: str, post_id: str) -> str:
        return self.get_post(author_code, post_id).text

    def get_post_timestamp(self, author_code: str, post_id: str) -> int:
        return self.get_post(author_code, post_id).timestamp

    def post_count(self, author_code: str) -> int:
        return len(self.persons.require(author_code).posts)

    def get_paginated_user_posts(self, author_code: str, page_number: int, page_size: int) -> List[str]:
        """Ids of the author's posts, newest first, for one 1-indexed page.

        Raises:
            UnknownIdentifier: If the author is not registered
            InvalidPagination: If page_number < 1 or page_size <= 0
        """
        author = self.persons.require(author_code)
        return [p.post_id for p in _page(author.posts_newest_first(), page_number, page_size)]

    def get_paginated_friend_posts(self, author_code: str, page_number: int, page_size: int) -> List[str]:
        """Posts of all the person's friends, newest first, as "author:postId".

        Each friend's posts are already sorted, so the feed is a k-way merge
        of those lists on the global serial. The person's own posts are not
        part of the feed.

        Raises:
            UnknownIdentifier: If the person is not registered
            InvalidPagination: If page_number < 1 or page_size <= 0
        """
        person = self.persons.require(author_code)
        feeds = [self.persons.get(c).posts_newest_first() for c in sorted(person.friend_codes)]
        merged = heapq.merge(*feeds, key=lambda p: p.serial, reverse=True)
        return [f"{p.author_code}:{p.post_id}" for p in _page(merged, page_number, page_size)]
