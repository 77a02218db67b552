"""Local stand-in for the riddle service, for trying riddlebot offline."""
