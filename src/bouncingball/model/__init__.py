"""
The MODEL layer contains pure data structures and the physics update.
It has NO knowledge of the GUI (Qt).
It deals with the Ball, its Container and the shared World state.
"""
