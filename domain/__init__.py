"""Describes the Mixology domain. Centres around the `Bar`.

What is in a bar?

- A fixed book of known recipes, loaded once and never touched again.
- An association index: for every ingredient, everything it has been mixed with.

New cocktails come from walking the associations. Ingredients that are mixed
together often show up more often in the walk, which is about as much taste
as the machine has.

No invariants to enforce after loading. Nothing is mutated, so the bar can be
shared between requests without any care.
"""
