"""Status components, each a function of one argument returning a string or None."""