import json

from .protocol import Urn
from .protocol.magnet import parse_magnet


def urn_to_str(urn: Urn) -> str:
    return " + ".join(f"{urn_hash.scheme.value}:{urn_hash.hex()}" for urn_hash in urn.hashes)


async def run_parse(magnet_link: str) -> None:
    magnet = parse_magnet(magnet_link)
    for display_name in magnet.display_names:
        print("Display Name:", display_name)
    for keyword_topic in magnet.keyword_topics:
        print("Keyword Topic:", keyword_topic)
    for urn in magnet.exact_topics:
        print("Exact Topic:", urn_to_str(urn))
    for topic in magnet.manifest_topics:
        match topic:
            case Urn():
                print("Manifest Topic:", urn_to_str(topic))
            case str():
                print("Manifest Topic:", topic)
    for tracker_url in magnet.tracker_addresses:
        print("Tracker URL:", tracker_url)
    for source in magnet.acceptable_sources:
        print("Acceptable Source:", source)
    for source in magnet.exact_sources:
        print("Exact Source:", source)
    for prefix, supplements in magnet.supplements.items():
        for supplement in supplements:
            print(f"Supplement: {prefix}{supplement.tag}={supplement.value}")
    if magnet.exact_length:
        print("Exact Length:", magnet.exact_length)


async def run_hashes(magnet_link: str) -> None:
    magnet = parse_magnet(magnet_link)
    for urn_hash in magnet.hashes():
        print(f"{urn_hash.scheme.value}: {urn_hash.hex()}")


async def run_json(magnet_link: str) -> None:
    magnet = parse_magnet(magnet_link)
    print(json.dumps(magnet.to_dict()))
