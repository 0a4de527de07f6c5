"""The earlier, flat-record edition of the academic system."""