"""Terminal and web front ends that replay Boyer-Moore scan steps."""
