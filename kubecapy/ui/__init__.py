"""Screen views and the curses renderer."""