from robot_census.cli import main

main()
