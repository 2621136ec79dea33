"""Topic ordering score.

Listings sort topics by ``dateline``. For most groups that is simply the
time of the latest reply. Topics in the special group decay with age so a
burst of replies on an old thread does not pin it to the top forever.
"""

import math

from forum.domain.model.topic import Topic
from forum.domain.value import GroupId

SPECIAL_GROUP_ID = GroupId(364)

GRAVITY = 1.8
AGE_OFFSET_HOURS = 0.1
PENALTY_SCALE = 200


def compute_ordering_score(now: int, topic: Topic) -> int:
    """Compute the new ``dateline`` of a topic receiving a reply at ``now``.

    Args:
        now: Time of the new reply (unix seconds)
        topic: Topic as it was before the reply, counter not yet incremented

    Returns:
        Ordering score, never later than ``now``
    """
    if topic.group_id != SPECIAL_GROUP_ID or topic.replies <= 0:
        return now

    age_hours = max(now - topic.created_at, 0) / 3600
    penalty = (age_hours + AGE_OFFSET_HOURS) ** GRAVITY / topic.replies * PENALTY_SCALE
    return min(math.floor(now - penalty), now)
