"""Sample gateway bodies, shaped after the examples in the Discord API docs."""

USER = {
    "id": "80351110224678912",
    "username": "Nelly",
    "discriminator": "1337",
    "avatar": "8342729096ea3675442027381ff50dfe",
}

MEMBER = {
    "user": USER,
    "nick": None,
    "roles": [],
    "joined_at": "2015-04-26T06:26:56.936000+00:00",
    "deaf": False,
    "mute": False,
}

ROLE = {
    "id": "41771983423143936",
    "name": "WE DEM BOYZZ!!!!!!",
    "color": 3447003,
    "hoist": True,
    "position": 1,
    "permissions": "66321471",
    "managed": False,
    "mentionable": False,
}

CHANNEL = {
    "id": "41771983423143937",
    "guild_id": "41771983423143937",
    "name": "general",
    "type": 0,
    "position": 6,
    "permission_overwrites": [],
    "rate_limit_per_user": 2,
    "nsfw": True,
    "topic": "24/7 chat about how to gank Mike #2",
    "last_message_id": "155117677105512449",
    "parent_id": "399942396007890945",
}

MESSAGE = {
    "id": "334385199974967042",
    "channel_id": "290926798999357250",
    "author": USER,
    "content": "Supa Hot",
    "timestamp": "2017-07-11T17:27:07.299000+00:00",
    "edited_timestamp": None,
    "tts": False,
    "mention_everyone": False,
    "mentions": [],
    "mention_roles": [],
    "attachments": [],
    "pinned": False,
}

REACTION_EMOJI = {"id": None, "name": "🔥"}

# One minimal valid body per registered dispatch tag.
DISPATCH_BODIES = {
    "READY": {
        "v": 8,
        "user": USER,
        "private_channels": [],
        "guilds": [{"id": "41771983423143937", "unavailable": True}],
        "session_id": "d1d3b5c0a8e56e0f4cd3b4a2b8c9f1e0",
        "shard": [0, 1],
    },
    "RESUMED": {"_trace": ["gateway-prd-main-858d"]},
    "RECONNECT": {},
    "CHANNEL_CREATE": CHANNEL,
    "CHANNEL_UPDATE": CHANNEL,
    "CHANNEL_DELETE": CHANNEL,
    "CHANNEL_PINS_UPDATE": {"channel_id": "290926798999357250", "last_pin_timestamp": None},
    "GUILD_CREATE": {
        "id": "41771983423143937",
        "name": "Discord Developers",
        "owner_id": "80351110224678912",
        "roles": [ROLE],
        "emojis": [],
        "features": ["NEWS"],
        "member_count": 1,
        "members": [MEMBER],
        "channels": [CHANNEL],
    },
    "GUILD_UPDATE": {"id": "41771983423143937", "name": "Discord Developers"},
    "GUILD_DELETE": {"id": "41771983423143937", "unavailable": True},
    "GUILD_BAN_ADD": {"guild_id": "41771983423143937", "user": USER},
    "GUILD_BAN_REMOVE": {"guild_id": "41771983423143937", "user": USER},
    "GUILD_EMOJIS_UPDATE": {
        "guild_id": "41771983423143937",
        "emojis": [{"id": "41771983429993937", "name": "LUL", "roles": [], "require_colons": True,
                    "managed": False, "animated": False}],
    },
    "GUILD_INTEGRATIONS_UPDATE": {"guild_id": "41771983423143937"},
    "GUILD_MEMBER_ADD": {**MEMBER, "guild_id": "41771983423143937"},
    "GUILD_MEMBER_REMOVE": {"guild_id": "41771983423143937", "user": USER},
    "GUILD_MEMBER_UPDATE": {"guild_id": "41771983423143937", "roles": ["41771983423143936"],
                            "user": USER, "nick": "nelly"},
    "GUILD_MEMBERS_CHUNK": {"guild_id": "41771983423143937", "members": [MEMBER],
                            "chunk_index": 0, "chunk_count": 1},
    "GUILD_ROLE_CREATE": {"guild_id": "41771983423143937", "role": ROLE},
    "GUILD_ROLE_UPDATE": {"guild_id": "41771983423143937", "role": ROLE},
    "GUILD_ROLE_DELETE": {"guild_id": "41771983423143937", "role_id": "41771983423143936"},
    "MESSAGE_CREATE": MESSAGE,
    "MESSAGE_UPDATE": {"id": "334385199974967042", "channel_id": "290926798999357250",
                       "content": "Supa Hot (edited)", "edited_timestamp": "2017-07-11T17:30:00.000000+00:00"},
    "MESSAGE_DELETE": {"id": "334385199974967042", "channel_id": "290926798999357250"},
    "MESSAGE_DELETE_BULK": {"ids": ["334385199974967042", "334385199974967043"],
                            "channel_id": "290926798999357250"},
    "MESSAGE_REACTION_ADD": {"user_id": "80351110224678912", "channel_id": "290926798999357250",
                             "message_id": "334385199974967042", "emoji": REACTION_EMOJI},
    "MESSAGE_REACTION_REMOVE": {"user_id": "80351110224678912", "channel_id": "290926798999357250",
                                "message_id": "334385199974967042", "emoji": REACTION_EMOJI},
    "MESSAGE_REACTION_REMOVE_ALL": {"channel_id": "290926798999357250", "message_id": "334385199974967042"},
    "MESSAGE_REACTION_REMOVE_EMOJI": {"channel_id": "290926798999357250", "message_id": "334385199974967042",
                                      "emoji": REACTION_EMOJI},
    "PRESENCE_UPDATE": {
        "user": {"id": "80351110224678912"},
        "guild_id": "41771983423143937",
        "status": "online",
        "activities": [{"name": "Rocket League", "type": 0}],
        "client_status": {"desktop": "online"},
    },
    "TYPING_START": {"channel_id": "290926798999357250", "user_id": "80351110224678912",
                     "timestamp": 1603034345},
    "USER_UPDATE": USER,
    "VOICE_STATE_UPDATE": {
        "guild_id": "41771983423143937",
        "channel_id": "157733188964188161",
        "user_id": "80351110224678912",
        "session_id": "90326bd25d71d39b9ef95b299e3872ff",
        "deaf": False,
        "mute": False,
        "self_deaf": False,
        "self_mute": True,
        "self_video": False,
        "suppress": False,
    },
    "VOICE_SERVER_UPDATE": {"token": "my_token", "guild_id": "41771983423143937",
                            "endpoint": "smart.loyal.discord.gg"},
}


