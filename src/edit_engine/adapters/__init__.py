"""Host front ends that drive an ``EditorSession``."""
