"""
Ozon API 聊天相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class ListChatsFilter(OzonParams):
    # All / Opened / Closed
    chat_status: Optional[str] = None
    unread_only: Optional[bool] = None


class ListChatsParams(OzonParams):
    filter: Optional[ListChatsFilter] = None
    # 最大 100
    limit: Optional[int] = None
    # 分页游标（上一页响应中的 cursor）
    cursor: Optional[str] = None


class Chat(OzonModel):
    chat_id: str = ""
    # Opened / Closed
    chat_status: str = ""
    # Seller_Support / Buyer_Seller
    chat_type: str = ""
    created_at: OzonDateTime = None


class ChatListItem(OzonModel):
    chat: Chat = Field(default_factory=Chat)
    first_unread_message_id: int = 0
    last_message_id: int = 0
    unread_count: int = 0


class ListChatsResponse(CommonResponse):
    chats: List[ChatListItem] = []
    cursor: str = ""
    has_next: bool = False


class GetChatHistoryParams(OzonParams):
    chat_id: Optional[str] = None
    # Forward / Backward
    direction: Optional[str] = None
    from_message_id: Optional[int] = None
    # 最大 1000
    limit: Optional[int] = None


class MessageContext(OzonModel):
    order_number: str = ""
    sku: str = ""


class MessageUser(OzonModel):
    id: str = ""
    # customer / seller / crm / courier / support
    type: str = ""


class ChatMessage(OzonModel):
    message_id: int = 0
    created_at: OzonDateTime = None
    context: Optional[MessageContext] = None
    # 消息内容（Markdown）
    data: List[str] = []
    is_image: bool = False
    is_read: bool = False
    moderate_image_status: str = ""
    user: MessageUser = Field(default_factory=MessageUser)


class GetChatHistoryResponse(CommonResponse):
    has_next: bool = False
    messages: List[ChatMessage] = []


class SendMessageParams(OzonParams):
    chat_id: Optional[str] = None
    # 1 到 1000 个字符
    text: Optional[str] = None


class SendMessageResponse(CommonResponse):
    result: str = ""


class MarkAsReadParams(OzonParams):
    chat_id: Optional[str] = None
    # 该消息及之前的消息标记为已读；不传则全部已读
    from_message_id: Optional[int] = None


class MarkAsReadResponse(CommonResponse):
    unread_count: int = 0


class Chats(APIGroup):
    """聊天相关 API 方法"""

    def list_chats(self, params: ListChatsParams) -> ListChatsResponse:
        """
        获取聊天列表
        使用 /v3/chat/list 接口
        """
        return self._client.request("POST", "/v3/chat/list", params, ListChatsResponse)

    def get_chat_history(self, params: GetChatHistoryParams) -> GetChatHistoryResponse:
        """获取聊天历史消息（/v3/chat/history）"""
        return self._client.request("POST", "/v3/chat/history", params, GetChatHistoryResponse)

    def send_message(self, params: SendMessageParams) -> SendMessageResponse:
        """发送聊天消息（/v1/chat/send/message）"""
        return self._client.request("POST", "/v1/chat/send/message", params, SendMessageResponse)

    def mark_as_read(self, params: MarkAsReadParams) -> MarkAsReadResponse:
        """
        标记聊天为已读
        使用 /v2/chat/read 接口

        Returns:
            unread_count 为剩余未读消息数
        """
        return self._client.request("POST", "/v2/chat/read", params, MarkAsReadResponse)
