"""Application state, navigation state machine and the controller that owns them."""
