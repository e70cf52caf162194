import asyncio
import json
import sys

from scraper.interfaces.models import Preferences
from scraper.sources.realtor_scraper import PropertyRecommender


async def run(preferences: Preferences) -> int:
    recommender = PropertyRecommender(logger=print)

    try:
        print("Getting recommendations…")
        result = await recommender.get_recommendations(preferences)
    finally:
        await recommender.close()

    print(json.dumps(result.to_dict(), indent=2, default=str))

    if not result.success:
        print(f"❌ {result.error}")
        return 1

    print(f"\n🏠 {len(result.recommendations)} of {result.total_found} properties recommended")
    return 0


if __name__ == "__main__":
    prefs = Preferences(
        location=sys.argv[1] if len(sys.argv) > 1 else "Miami_FL",
        property_type="single-family-home",
        min_beds=2,
        max_beds=4,
        min_baths=2,
        min_price=150000,
        max_price=250000,
        sort_by=1,
        budget=200000,
        preferred_beds=3,
        min_sqft=1200,
    )
    sys.exit(asyncio.run(run(prefs)))
