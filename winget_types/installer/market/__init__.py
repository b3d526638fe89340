"""Market codes and sets of allowed or excluded markets."""