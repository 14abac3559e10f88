from weather_station.app import main

# python main.py  (same as the weather-station console script)
if __name__ == "__main__":
    main()
