"""WordQuest command line."""
