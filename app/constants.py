"""Featured developer events shown on listing pages. Not persisted."""

from app.schemas.event import EventItem

EVENTS = (
    EventItem(
        title="React Summit 2025",
        image="/images/event1.png",
        slug="react-summit-2025",
        location="Amsterdam, NL",
        date="2025-12-12",
        time="09:00",
    ),
    EventItem(
        title="Next.js Conf Europe 2026",
        image="/images/event2.png",
        slug="nextjs-conf-europe-2026",
        location="Berlin, DE",
        date="2026-03-18",
        time="10:00",
    ),
    EventItem(
        title="JSNation Live",
        image="/images/event3.png",
        slug="jsnation-live-2026",
        location="Online",
        date="2026-01-27",
        time="16:00",
    ),
    EventItem(
        title="Open Source Summit North America",
        image="/images/event4.png",
        slug="oss-summit-na-2026",
        location="Austin, TX, USA",
        date="2026-04-14",
        time="09:30",
    ),
    EventItem(
        title="Hack The Future 48h Hackathon",
        image="/images/event5.png",
        slug="hack-the-future-2026",
        location="Toronto, CA",
        date="2026-02-20",
        time="18:00",
    ),
    EventItem(
        title="AWS Community Day",
        image="/images/event6.png",
        slug="aws-community-day-2026",
        location="Sydney, AU",
        date="2026-05-09",
        time="08:30",
    ),
    EventItem(
        title="Full Stack Fest",
        image="/images/event-full.png",
        slug="full-stack-fest-2026",
        location="Barcelona, ES",
        date="2026-06-17",
        time="09:00",
    ),
)
