"""
Dex Widget Preview Example

This example walks through what the widget host sees:

1. The placeholder shown before anything is loaded
2. Loading the bundled record into a store
3. Pulling a timeline and describing each entry at every widget size
"""

from datetime import datetime, timedelta, timezone

from dex import Dex, HostContext, SizeClass


def main():
    print("=" * 60)
    print("Dex Widget Preview")
    print("=" * 60)

    with Dex() as dex:
        # ======================================================================
        # Before loading: placeholder content
        # ======================================================================
        entry = dex.provider.placeholder(HostContext())
        print(f"\nPlaceholder: {entry.name} {entry.categories}")

        # ======================================================================
        # Load the bundled record
        # ======================================================================
        pokemon = dex.start()
        print(f"Loaded: {pokemon.name} {pokemon.categories} ({pokemon.image_reference})")

        # ======================================================================
        # Pull a timeline the way the host does
        # ======================================================================
        now = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
        timeline = dex.generator.generate(now, count=5, interval=timedelta(hours=1))

        print("\n" + "-" * 40)
        print(f"Timeline ({len(timeline.entries)} entries, reload {timeline.policy.value})")
        print("-" * 40)
        for item in timeline.entries:
            print(f"  {item.timestamp.isoformat()}  {item.name}")

        for size in (SizeClass.SMALL, SizeClass.MEDIUM, SizeClass.LARGE):
            description = dex.provider.render(HostContext(size_class=size), timeline.first)
            badges = ", ".join(b.label for b in description.badges) or "-"
            print(f"\n[{size.value}] {description.arrangement.value} on {description.background_color}")
            print(f"  title: {description.title or '-'}  badges: {badges}")


if __name__ == "__main__":
    main()
