#!/usr/bin/env python

if __name__ == "__main__":
    from scorecardio import command_line

    command_line()
