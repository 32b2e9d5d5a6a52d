import asyncio
from typing import Callable, Dict, Type

from . import messages as m
from .errors import SocialError, UnknownIdentifier
from .graph import SocialGraph
from ..utils.logger import setup_logger

logger = setup_logger('socialapp.service')

class SocialService:
    """Request/response facade over a SocialGraph.

    Each method takes one request from socialapp.server.messages and
    returns the matching response. Rejected operations come back as a
    response with success=False and the error kind instead of raising.
    """

    def __init__(self, graph: SocialGraph):
        """Initialize social service with the graph it serves.

        Args:
            graph (SocialGraph): Graph owning all people, groups and posts

        Attributes:
            graph: Graph instance
            graph_lock: Serializes every operation, so a reader never sees
                one side of a friendship or membership without the other
        """
        self.graph = graph
        self.graph_lock = asyncio.Lock()

    async def _call(self, rpc: str, response_cls: Type[m.Response], op: Callable[[], Dict]) -> m.Response:
        """Run op under the graph lock and wrap its payload in response_cls.

        Side Effects:
            - Logs rejected requests with their error kind
        """
        try:
            async with self.graph_lock:
                payload = op()
        except SocialError as e:
            logger.warning(f"{rpc}: rejected ({e.kind}): {e}")
            return response_cls(success=False, error_kind=e.kind, error_message=str(e))
        logger.debug(f"{rpc}: ok")
        return response_cls(**payload)

    # People

    async def RegisterPerson(self, request: m.RegisterPersonRequest) -> m.RegisterPersonResponse:
        def op():
            self.graph.register_person(request.code, request.name, request.surname)
            return {}
        return await self._call("RegisterPerson", m.RegisterPersonResponse, op)

    async def GetPersonInfo(self, request: m.GetPersonInfoRequest) -> m.GetPersonInfoResponse:
        return await self._call("GetPersonInfo", m.GetPersonInfoResponse,
                                lambda: {"info": self.graph.get_person_info(request.code)})

    async def SearchPersons(self, request: m.SearchPersonsRequest) -> m.SearchPersonsResponse:
        """Case-insensitive substring search on "name surname"."""
        return await self._call("SearchPersons", m.SearchPersonsResponse,
                                lambda: {"codes": self.graph.search_persons(request.query)})

    # Friendships

    async def AddFriendship(self, request: m.AddFriendshipRequest) -> m.AddFriendshipResponse:
        return await self._call("AddFriendship", m.AddFriendshipResponse,
                                lambda: {"created": self.graph.add_friendship(request.code_a, request.code_b)})

    async def ListFriends(self, request: m.ListFriendsRequest) -> m.ListFriendsResponse:
        return await self._call("ListFriends", m.ListFriendsResponse,
                                lambda: {"codes": self.graph.list_friends(request.code)})

    async def FriendsOfFriends(self, request: m.FriendsOfFriendsRequest) -> m.FriendsOfFriendsResponse:
        """Second-level friends, one entry per path unless distinct is set."""
        def op():
            if request.distinct:
                return {"codes": self.graph.friends_of_friends_distinct(request.code)}
            return {"codes": self.graph.friends_of_friends(request.code)}
        return await self._call("FriendsOfFriends", m.FriendsOfFriendsResponse, op)

    # Groups

    async def CreateGroup(self, request: m.CreateGroupRequest) -> m.CreateGroupResponse:
        """Create a group. An existing name succeeds with created=False."""
        return await self._call("CreateGroup", m.CreateGroupResponse,
                                lambda: {"created": self.graph.create_group(request.group_name)})

    async def AddPersonToGroup(self, request: m.AddPersonToGroupRequest) -> m.AddPersonToGroupResponse:
        """Subscribe a person to a group. Already a member succeeds with added=False."""
        return await self._call("AddPersonToGroup", m.AddPersonToGroupResponse,
                                lambda: {"added": self.graph.add_person_to_group(request.code, request.group_name)})

    async def ListGroupMembers(self, request: m.ListGroupMembersRequest) -> m.ListGroupMembersResponse:
        return await self._call("ListGroupMembers", m.ListGroupMembersResponse,
                                lambda: {"codes": self.graph.list_group_members(request.group_name)})

    async def ListGroups(self, request: m.ListGroupsRequest) -> m.ListGroupsResponse:
        return await self._call("ListGroups", m.ListGroupsResponse,
                                lambda: {"names": self.graph.list_groups()})

    async def ListPersonGroups(self, request: m.ListPersonGroupsRequest) -> m.ListPersonGroupsResponse:
        return await self._call("ListPersonGroups", m.ListPersonGroupsResponse,
                                lambda: {"names": self.graph.list_person_groups(request.code)})

    # Rankings

    async def Ranking(self, request: m.RankingRequest) -> m.RankingResponse:
        """Winner of one ranking metric, None when there is nothing to rank.

        Metrics: most_friends, most_friends_of_friends, largest_group, most_groups.
        """
        rankings = dict(zip(m.RANKING_METRICS, (
            self.graph.person_with_most_friends,
            self.graph.person_with_most_friends_of_friends,
            self.graph.largest_group,
            self.graph.person_in_most_groups,
        )))

        def op():
            if request.metric not in m.RANKING_METRICS:
                raise UnknownIdentifier(f"Unknown ranking metric {request.metric}")
            return {"winner": rankings[request.metric]()}
        return await self._call("Ranking", m.RankingResponse, op)

    # Posts

    async def CreatePost(self, request: m.CreatePostRequest) -> m.CreatePostResponse:
        return await self._call("CreatePost", m.CreatePostResponse,
                                lambda: {"post_id": self.graph.create_post(
                                    request.author_code, request.text, request.timestamp)})

    async def GetPost(self, request: m.GetPostRequest) -> m.GetPostResponse:
        def op():
            post = self.graph.get_post(request.author_code, request.post_id)
            return {"text": post.text, "timestamp": post.timestamp}
        return await self._call("GetPost", m.GetPostResponse, op)

    async def GetPaginatedUserPosts(self, request: m.PaginatedPostsRequest) -> m.PaginatedPostsResponse:
        return await self._call("GetPaginatedUserPosts", m.PaginatedPostsResponse,
                                lambda: {"post_ids": self.graph.get_paginated_user_posts(
                                    request.author_code, request.page_number, request.page_size)})

    async def GetPaginatedFriendPosts(self, request: m.PaginatedPostsRequest) -> m.PaginatedPostsResponse:
        """Friends' posts, newest first, each id formatted as "author:postId"."""
        return await self._call("GetPaginatedFriendPosts", m.PaginatedPostsResponse,
                                lambda: {"post_ids": self.graph.get_paginated_friend_posts(
                                    request.author_code, request.page_number, request.page_size)})
